"""
Generate an Ed25519 key pair for token signing.

Usage:
    python scripts/generate_keys.py --out-dir fixtures
    python scripts/generate_keys.py --out-dir /etc/chatserver --force

Writes encoding.pem (private, PKCS8) and decoding.pem (public, SPKI), the
file names AUTH_PRIVATE_KEY_PATH / AUTH_PUBLIC_KEY_PATH default to.
"""

import argparse
import logging
import sys
from pathlib import Path

from chatserver.infrastructure.security import generate_token_keys

logger = logging.getLogger("chatserver.scripts.generate_keys")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate an Ed25519 token key pair")
    parser.add_argument("--out-dir", default="fixtures", help="Output directory")
    parser.add_argument("--private-name", default="encoding.pem")
    parser.add_argument("--public-name", default="decoding.pem")
    parser.add_argument(
        "--force", action="store_true", help="Overwrite existing key files"
    )
    args = parser.parse_args(argv)

    out_dir = Path(args.out_dir)
    private_path = out_dir / args.private_name
    public_path = out_dir / args.public_name

    existing = [p for p in (private_path, public_path) if p.exists()]
    if existing and not args.force:
        logger.error(f"Refusing to overwrite {', '.join(map(str, existing))} (use --force)")
        return 1

    keys = generate_token_keys()
    out_dir.mkdir(parents=True, exist_ok=True)
    private_path.write_bytes(keys.private_pem())
    private_path.chmod(0o600)
    public_path.write_bytes(keys.public_pem())

    logger.info(f"Wrote {private_path} and {public_path}")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    sys.exit(main())
