class NotesError(Exception):
    """Base class for failures that end a request with an error page."""


class NoFileUploaded(NotesError):
    def __init__(self) -> None:
        super().__init__("No file uploaded")


class UploadDecodeError(NotesError):
    pass


class CsvParseError(NotesError):
    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class MissingFieldError(NotesError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field: {field}")
