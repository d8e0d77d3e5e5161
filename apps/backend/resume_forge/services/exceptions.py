class ResumeValidationError(Exception):
    """
    Exception raised when the caller's input cannot be processed
    (blank text, empty file, unsupported upload, empty chat).
    """

    def __init__(self, message: str = "Resume input is invalid"):
        self.message = message
        super().__init__(message)


class ResumeParsingError(Exception):
    """
    Exception raised when the language model fails or returns output that
    cannot be turned into a resume.
    """

    def __init__(self, message: str = "Failed to parse resume"):
        self.message = message
        super().__init__(message)
