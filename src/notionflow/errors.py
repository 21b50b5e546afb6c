"""Error taxonomy for the import pipeline."""


class NotionFlowError(Exception):
    """Base class for every error raised by notionflow."""


class ConfigurationError(NotionFlowError):
    """Required credentials or settings are missing."""


class SelectionError(NotionFlowError):
    """No file was chosen, or the chosen file is not a .csv."""


class MalformedInputError(NotionFlowError):
    """The source cannot be decoded as comma-delimited text."""


class EmptyHeaderError(NotionFlowError):
    """The header row yields zero field names."""


class EmptyDatasetError(NotionFlowError):
    """The source has a header but no data rows."""


class RemoteStoreError(NotionFlowError):
    """A call to the remote record store failed."""

    def __init__(self, message: str, status: int | None = None, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        return f"{self.status} {self.code or 'error'}: {self.message}"


class PublishError(NotionFlowError):
    """Table creation failed remotely. Fatal for the whole import."""

    def __init__(self, label: str, cause: Exception):
        super().__init__(f"Could not create table '{label}': {cause}")
        self.label = label
        self.cause = cause


class UploadError(NotionFlowError):
    """A single row failed to upload. Recovered by the importer."""

    def __init__(self, row_label: str, cause: Exception):
        super().__init__(f"Error adding row \"{row_label}\" :: {cause}")
        self.row_label = row_label
        self.cause = cause
