"""Exception hierarchy for Trunic."""


class TrunicError(Exception):
    """Base exception for all Trunic errors."""

    pass


class InvariantError(TrunicError):
    """Internal consistency violation.

    Raised when two components disagree about something that should be
    impossible to get wrong from user input. Always indicates a bug.
    """

    pass


class GlyphNotFoundError(InvariantError):
    """A phoneme tag has no glyph in the active glyph source."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"No glyph for tag {tag!r}")


class InputError(TrunicError):
    """Errors related to reading input text."""

    pass


class InputReadError(InputError):
    """Error opening or reading an input file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read input '{path}': {reason}")


class OutputError(TrunicError):
    """Errors related to producing the output image."""

    pass


class ImageWriteError(OutputError):
    """Error writing the image to its destination."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write image '{path}': {reason}")


class ImageEncodeError(OutputError):
    """Error encoding the image as PNG."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to encode image: {reason}")


class SpriteSheetError(TrunicError):
    """Errors related to the bitmap sprite-sheet backend."""

    pass


class SpriteSheetLoadError(SpriteSheetError):
    """Error loading a sprite sheet image."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load sprite sheet '{path}': {reason}")


class SpriteSheetLayoutError(SpriteSheetError):
    """Sprite sheet image does not match the configured layout."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Invalid sprite sheet layout: {details}")


class TranscriptionError(TrunicError):
    """Errors related to IPA transcription."""

    pass


class UnknownTranscriberError(TranscriptionError):
    """Requested transcriber name is not known."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown transcriber: {name!r}")


class TranscriptionFailedError(TranscriptionError):
    """The transcription backend failed to produce IPA text."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Transcription failed: {reason}")
