"""
Подготовка картинок для рекламных карточек.

Использование:
    python scripts/trim_assets.py adcard [input] [output]
    python scripts/trim_assets.py tight [input] [heights_csv]

Примеры:
    python scripts/trim_assets.py adcard                    # public/bbs.png
    python scripts/trim_assets.py tight public/hh.png 180,196,212
"""
import logging
import sys

from wheatstone.core.config import settings
from wheatstone.features.assets.trimmer import trim_ad_card, trim_tight, parse_heights

logger = logging.getLogger("trim_assets")

AD_CARD_INPUT = settings.public_path("bbs.png")
AD_CARD_OUTPUT = settings.public_path("bbs.adcard.center.v4.png")
TIGHT_INPUT = settings.public_path("hh.png")


def print_float_ad_props(sized):
    """Подсказка пропсов FloatAd: картинка заполняет карточку без полей"""
    sm = sized[0]
    md = sized[1] if len(sized) > 1 else sm
    lg = sized[2] if len(sized) > 2 else md

    print("\nSuggested <FloatAd> props (no internal padding, no gutters):")
    print(f'  imageSrc="/hh.tight.h{lg["h"]}.v3.png"')
    print(f"  w={{{sm['w']}}} mdW={{{md['w']}}} lgW={{{lg['w']}}}")
    print(f"  h={{{sm['h']}}} mdH={{{md['h']}}} lgH={{{lg['h']}}}")
    print('  pad={0} intrinsic imgFit="contain"')
    print(
        f"  imgMaxH={{{sm['h']}}} mdImgMaxH={{{md['h']}}} lgImgMaxH={{{lg['h']}}}"
        ' imgClassName="w-full h-full max-w-none"'
    )


def run(argv):
    command = argv[1] if len(argv) > 1 else "adcard"

    if command == "adcard":
        input_path = argv[2] if len(argv) > 2 else AD_CARD_INPUT
        output_path = argv[3] if len(argv) > 3 else AD_CARD_OUTPUT
        print("Wrote", trim_ad_card(input_path, output_path))
    elif command == "tight":
        input_path = argv[2] if len(argv) > 2 else TIGHT_INPUT
        heights = parse_heights(argv[3] if len(argv) > 3 else None)
        outputs = trim_tight(input_path, settings.PUBLIC_DIR, heights)
        tight, sized = outputs[0], outputs[1:]
        aspect = tight["w"] / tight["h"]
        print(f"Trimmed: {tight['path']} ({tight['w']}x{tight['h']})  AR={aspect:.4f}")
        for item in sized:
            print(f"Wrote {item['path']} ({item['w']}x{item['h']})")
        if sized:
            print_float_ad_props(sized)
    else:
        raise ValueError(f"Неизвестная команда: {command}")


def main():
    try:
        run(sys.argv)
    except Exception as e:
        logger.error(f"trim_assets завершился с ошибкой: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
