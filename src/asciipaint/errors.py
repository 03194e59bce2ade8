class AsciiPaintError(Exception):
    """Base class for errors raised while converting an image."""


class FontLoadError(AsciiPaintError):
    pass


class EmptyTextSourceError(AsciiPaintError):
    pass


class DegenerateGridError(AsciiPaintError):
    pass


class GlyphRasterError(AsciiPaintError):
    def __init__(self, char: str, reason: str = "no renderable glyph in font"):
        super().__init__(f"{char!r}: {reason}")
        self.char = char


class InvalidConfigurationError(AsciiPaintError, ValueError):
    pass


class ImageLoadError(AsciiPaintError):
    pass


class ImageWriteError(AsciiPaintError):
    pass
