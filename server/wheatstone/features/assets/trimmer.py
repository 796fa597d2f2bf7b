import logging
import os
import re
from typing import Dict, Iterable, List, Optional, Tuple

from PIL import Image, ImageOps

logger = logging.getLogger(__name__)

TRANSPARENT = (0, 0, 0, 0)

# Рекламная карточка: внутренняя область 328x170 минус отступ 8 с каждой стороны
AD_CARD_SIZE = (292, 134)
AD_CARD_PADDING = {"top": 4, "right": 8, "bottom": 4, "left": 8}
AD_CARD_THRESHOLD = 10

# Плотная обрезка логотипа для плавающего баннера
TIGHT_THRESHOLD = 40
TIGHT_HEIGHTS = (140, 148, 156)

PNG_COMPRESS_LEVEL = 9

LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def trim_transparent(image: Image.Image, threshold: int = AD_CARD_THRESHOLD) -> Image.Image:
    """
    Обрезать прозрачные поля.

    Остаются пиксели с alpha > threshold; если таких нет,
    изображение возвращается без изменений.
    """
    rgba = image.convert("RGBA")
    mask = rgba.getchannel("A").point(lambda a: 255 if a > threshold else 0)
    bbox = mask.getbbox()
    if bbox is None:
        logger.warning("Изображение полностью прозрачно, обрезка пропущена")
        return rgba
    logger.debug("Обрезка %s -> %s", rgba.size, bbox)
    return rgba.crop(bbox)


def pad_transparent(
    image: Image.Image,
    top: int = 0,
    right: int = 0,
    bottom: int = 0,
    left: int = 0,
) -> Image.Image:
    """Добавить прозрачные поля (могут быть несимметричными)."""
    width, height = image.size
    canvas = Image.new(
        "RGBA", (width + left + right, height + top + bottom), TRANSPARENT
    )
    canvas.paste(image.convert("RGBA"), (left, top))
    return canvas


def fit_contain(image: Image.Image, width: int, height: int) -> Image.Image:
    """
    Вписать изображение в width x height с сохранением пропорций,
    по центру на прозрачном фоне. Увеличение разрешено.
    """
    return ImageOps.pad(
        image.convert("RGBA"),
        (width, height),
        method=Image.Resampling.LANCZOS,
        color=TRANSPARENT,
        centering=(0.5, 0.5),
    )


def save_png(image: Image.Image, path: str) -> str:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    image.save(path, format="PNG", compress_level=PNG_COMPRESS_LEVEL)
    return path


def trim_ad_card(
    input_path: str,
    output_path: str,
    threshold: int = AD_CARD_THRESHOLD,
    padding: Optional[Dict[str, int]] = None,
    size: Tuple[int, int] = AD_CARD_SIZE,
) -> str:
    """
    Подготовить картинку для рекламной карточки:
    обрезка прозрачных полей -> отступы -> вписывание в size -> PNG.
    """
    padding = AD_CARD_PADDING if padding is None else padding
    with Image.open(input_path) as source:
        trimmed = trim_transparent(source, threshold)
    padded = pad_transparent(trimmed, **padding)
    result = fit_contain(padded, *size)
    save_png(result, output_path)
    logger.info(f"Записан {output_path} ({result.width}x{result.height})")
    return output_path


def trim_tight(
    input_path: str,
    output_dir: str,
    heights: Iterable[int] = TIGHT_HEIGHTS,
    threshold: int = TIGHT_THRESHOLD,
    name: str = "hh",
    version: str = "v3",
) -> List[Dict[str, object]]:
    """
    Плотно обрезать логотип и выпустить по файлу на каждую высоту.

    Ширина вычисляется из пропорций обрезанного изображения, поэтому
    картинка заполняет карточку без полей. Возвращает список
    {"h", "w", "path"}; первым элементом идет сам обрезанный файл.
    """
    with Image.open(input_path) as source:
        tight = trim_transparent(source, threshold)

    tight_path = save_png(tight, os.path.join(output_dir, f"{name}.tight.{version}.png"))
    aspect = tight.width / tight.height
    logger.info(f"Обрезано: {tight_path} ({tight.width}x{tight.height}) AR={aspect:.4f}")

    outputs = [{"h": tight.height, "w": tight.width, "path": tight_path}]
    for height in heights:
        width = max(1, round(height * aspect))
        path = os.path.join(output_dir, f"{name}.tight.h{height}.{version}.png")
        save_png(fit_contain(tight, width, height), path)
        logger.info(f"Записан {path} ({width}x{height})")
        outputs.append({"h": height, "w": width, "path": path})
    return outputs


def parse_heights(value: Optional[str]) -> List[int]:
    """
    '140,148,156' -> [140, 148, 156].

    Берутся ведущие цифры каждого значения ('140px' -> 140); пустые,
    нечисловые и неположительные значения пропускаются.
    """
    if not value:
        return list(TIGHT_HEIGHTS)
    heights = []
    for part in value.split(","):
        match = LEADING_INT.match(part)
        if match and int(match.group(1)) > 0:
            heights.append(int(match.group(1)))
    return heights
