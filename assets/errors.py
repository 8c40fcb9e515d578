"""
errors.py - Exceptions raised by the asset pipeline.

Every error is fatal for the request that triggered it. The HTTP layer maps
``status_code`` onto the response.
"""


class AssetError(Exception):
    """Base class for all asset pipeline failures."""
    status_code = 500
    title = "Asset Error"


class UnknownAssetType(AssetError):
    status_code = 404
    title = "Unknown Asset Type"


class InvalidAssetName(AssetError):
    status_code = 400
    title = "Invalid Asset Name"


class FileNotFound(AssetError):
    status_code = 404
    title = "Not Found"

    def __init__(self, reference):
        self.reference = reference
        super().__init__(
            f"Could not determine absolute path for file `{reference}'. "
            f"It probably does not exist."
        )


class FileUnreadable(AssetError):
    title = "File Unreadable"

    def __init__(self, filename, reason=None):
        self.filename = filename
        message = f"Could not read file `{filename}'. Please check the file permissions."
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class CacheWriteFailed(AssetError):
    title = "Cache Write Failed"

    def __init__(self, filename, reason=None):
        self.filename = filename
        message = f"Could not write caching file `{filename}'. Please check the file permissions."
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class CacheDirUnavailable(AssetError):
    title = "Cache Unavailable"

    def __init__(self, directory):
        self.directory = directory
        super().__init__(
            f"The caching directory `{directory}' does not exist or is "
            f"unaccessible. Please check the file permissions."
        )
