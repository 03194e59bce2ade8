import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from asciipaint.config import RenderConfig
from asciipaint.engine import RenderEngine
from asciipaint.errors import ImageLoadError, ImageWriteError

logger = logging.getLogger(__name__)


def load_image(path: str | Path) -> Image.Image:
    path = Path(path)
    try:
        with Image.open(path) as image:
            image.load()
            return image
    except FileNotFoundError:
        raise ImageLoadError(f"No such file: {path}") from None
    except Image.DecompressionBombError as e:
        raise ImageLoadError(f"Image too large: {path} ({e})") from e
    except (UnidentifiedImageError, OSError) as e:
        raise ImageLoadError(f"Unsupported image format: {path} ({e})") from e


def convert(image: Image.Image | str | Path, config: RenderConfig) -> Image.Image:
    """Render an image (or the image at a path) as tinted characters."""
    source = config.build_source()
    face = config.load_face()
    if not isinstance(image, Image.Image):
        image = load_image(image)

    logger.info("Rendering %dx%d image in %s mode with %s at %gpt", image.width, image.height, config.mode, face.name, face.size)
    engine = RenderEngine(
        face,
        source,
        scale=config.scale,
        background=config.background_rgb,
        rng=config.make_rng(),
        workers=config.workers,
        progress=config.progress,
    )
    return engine.render(image)


def convert_file(input_path: str | Path, output_path: str | Path, config: RenderConfig) -> Image.Image:
    """Convert an image file and write the result; nothing is written if rendering fails."""
    result = convert(input_path, config)
    try:
        result.save(output_path)
    except (OSError, ValueError) as e:
        raise ImageWriteError(f"Couldn't write to file: {output_path} ({e})") from e
    logger.info("Wrote %dx%d image to %s", result.width, result.height, output_path)
    return result
