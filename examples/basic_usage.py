from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from polysect import wide_flange, compute_section_properties, pretty


def main() -> None:
    section = wide_flange(d=12, bf=8, tf=0.75, tw=0.5)
    print(pretty(compute_section_properties(section), n=3))


if __name__ == "__main__":
    main()
