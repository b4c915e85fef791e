import sys
import logging

from gridcast import config
from gridcast.game import Game


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    world_path = sys.argv[1] if len(sys.argv) > 1 else None
    Game(world_path=world_path).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
