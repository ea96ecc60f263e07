from typing import Any, Mapping, Optional, Union

from datastore.data_table import DataTable
from datastore.events import EventEmitter
from datastore.pattern.sheet_options import SheetOptions, merge_options


class DataStore(EventEmitter):
    """
    Base class of the stores: owns the table fed by `load()` and the options
    merged over the class `default_options`.

    Progress is only reported through events, see `EventEmitter.on`.
    """

    default_options = SheetOptions()

    def __init__(
        self,
        table: Optional[DataTable] = None,
        options: Optional[Union[SheetOptions, Mapping[str, Any]]] = None,
    ):
        super().__init__()
        self.table = table if table is not None else DataTable()
        self.options = merge_options(self.default_options, options)

    async def load(self) -> None:
        raise NotImplementedError()
