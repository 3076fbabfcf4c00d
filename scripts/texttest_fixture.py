from __future__ import annotations

from gilded_rose.catalog import classic_catalog
from gilded_rose.reporting import render_days

DAYS = 31


def main() -> None:
    print("OMGHAI!")
    print(render_days(classic_catalog(), DAYS))


if __name__ == "__main__":
    main()
