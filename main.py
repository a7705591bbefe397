"""
BlurHash DSP
Compact BlurHash placeholders: image -> short ASCII hash -> blurred preview
"""

import argparse
import logging
import sys

logger = logging.getLogger('blurhash_dsp')


def run_encode(args) -> int:
    """Encode an image file (or synthetic image) and print its hash."""
    from engines.pipeline import encode_image, decode_hash
    from models import EncodeParams, DecodeParams
    from utils.image_io import load_image
    from utils.metrics import compute_psnr_ssim
    from utils.test_images import SYNTHETIC_IMAGES

    params = EncodeParams(
        x_components=args.x_components,
        y_components=args.y_components,
        sample_stride=args.stride,
        max_workers=args.workers,
    )

    if args.synthetic:
        image = SYNTHETIC_IMAGES[args.image]()
    else:
        logger.debug("Loading: %s", args.image)
        image = load_image(args.image, max_size=args.max_size)
    logger.debug("Image: %dx%d", image.shape[1], image.shape[0])

    blurhash = encode_image(image, params)

    if args.metrics:
        h, w = image.shape[:2]
        preview = decode_hash(blurhash, DecodeParams(width=w, height=h))
        metrics = compute_psnr_ssim(image, preview)
        print(f"PSNR (RGB): {metrics['psnr_rgb']:.2f} dB", file=sys.stderr)
        print(f"SSIM (RGB): {metrics['ssim_rgb']:.4f}", file=sys.stderr)

    print(blurhash)
    return 0


def run_decode(args) -> int:
    """Read a hash from --hash or stdin and write the decoded image."""
    from engines.pipeline import decode_hash
    from models import DecodeParams
    from utils.image_io import save_image

    params = DecodeParams(
        width=args.width,
        height=args.height,
        punch=args.punch,
        mode='RGBA' if args.rgba else 'RGB',
    )

    blurhash = args.hash if args.hash is not None else sys.stdin.read()
    blurhash = blurhash.strip()

    image = decode_hash(blurhash, params)
    save_image(image, args.output)
    logger.debug("Saved: %s", args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='blurhash-dsp',
        description='Encode images to BlurHash strings and decode them back.',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging on stderr')
    sub = parser.add_subparsers(dest='command', required=True)

    enc = sub.add_parser('encode', help='image file -> hash on stdout')
    enc.add_argument('image', help='image path, or a synthetic name with --synthetic')
    enc.add_argument('-x', '--x-components', dest='x_components', type=int, default=4)
    enc.add_argument('-y', '--y-components', dest='y_components', type=int, default=4)
    enc.add_argument('-s', '--stride', type=int, default=1,
                     help='sample every Nth pixel (default: 1)')
    enc.add_argument('--max-size', dest='max_size', type=int, default=None,
                     help='downscale so the longest side is at most N pixels')
    enc.add_argument('--workers', type=int, default=None,
                     help='transform threads (default: one per row)')
    enc.add_argument('--synthetic', action='store_true',
                     help='treat IMAGE as one of: solid, gradient, checkerboard, stripes')
    enc.add_argument('--metrics', action='store_true',
                     help='print PSNR/SSIM of the decoded hash to stderr')
    enc.set_defaults(func=run_encode)

    dec = sub.add_parser('decode', help='hash on stdin -> image file')
    dec.add_argument('output', help='output image path (format from extension)')
    dec.add_argument('--hash', default=None, help='hash string instead of stdin')
    dec.add_argument('--width', type=int, default=32)
    dec.add_argument('--height', type=int, default=32)
    dec.add_argument('--punch', type=float, default=1.0)
    dec.add_argument('--rgba', action='store_true', help='write an opaque alpha channel')
    dec.set_defaults(func=run_decode)

    return parser


def main(argv=None) -> int:
    from models.errors import BlurHashError, ImageIOError, InvalidComponentRange, MalformedHash

    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    if getattr(args, 'synthetic', False):
        from utils.test_images import SYNTHETIC_IMAGES
        if args.image not in SYNTHETIC_IMAGES:
            print(f"Unknown synthetic image: {args.image}", file=sys.stderr)
            return 1

    try:
        return args.func(args)
    except ImageIOError as e:
        print(f"Image error: {e}", file=sys.stderr)
    except InvalidComponentRange as e:
        print(f"Invalid component range: {e}", file=sys.stderr)
    except MalformedHash as e:
        print(f"Malformed hash: {e}", file=sys.stderr)
    except BlurHashError as e:
        print(f"Could not calculate blur hash: {e}", file=sys.stderr)
    except ValueError as e:
        print(f"Invalid argument: {e}", file=sys.stderr)
    return 1


if __name__ == '__main__':
    sys.exit(main())
