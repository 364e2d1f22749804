"""Example script. Run with `python -m src.scripts.example` from the project root."""

from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]
RAW_DATA = PROJECT_ROOT / "data" / "raw"


def main() -> None:
    files = sorted(p.name for p in RAW_DATA.iterdir() if p.name != ".gitkeep")
    print(f"{len(files)} raw data file(s) in {RAW_DATA}")


if __name__ == "__main__":
    main()
