from typing import Optional


class DataStoreError(Exception):
    def __init__(self, store="Google", reason="loading error"):
        super().__init__(f"DATA STORE ERROR ({store}): {reason}")
        self.store = store
        self.reason = reason


class InvalidOptionsError(DataStoreError):
    def __init__(self, reason):
        super().__init__("Google", f"Invalid options: {reason}")


class FetchError(DataStoreError):
    def __init__(self, url, reason="request failed", status_code: Optional[int] = None):
        if status_code is not None:
            reason = f"error {status_code} while fetching {url}"
        super().__init__("Google", reason)
        self.url = url
        self.status_code = status_code
