"""Entry point kept minimal by delegating to Engine.

The engine opens the window, loads the images and hosts the game scene; all
gameplay lives under `world`.
"""

from core.engine import Engine  # noqa: E402 (local import order)


def main():  # small wrapper for clarity / debuggers
    Engine().run()


if __name__ == "__main__":
    main()
