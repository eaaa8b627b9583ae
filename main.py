"""
BALL BLAST // Ultimate Edition
Entry point.
"""

import logging
import os

# Windows HiDPI: pygame should get logical pixels, one per requested pixel.
os.environ.setdefault('SDL_VIDEO_HIGHDPI_DISABLED', '1')

from ball_blast.game import Game


def main():
    logging.basicConfig(
        level=os.environ.get("BALL_BLAST_LOG", "INFO").upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    game = Game()
    game.run()


if __name__ == "__main__":
    main()
