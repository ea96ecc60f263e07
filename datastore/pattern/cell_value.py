from typing import List, Optional, Union

CellValue = Optional[Union[str, float]]
Columns = List[List[CellValue]]
