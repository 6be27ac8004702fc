from .cli import parse_args
from .build import build_maps


def main() -> None:
    build_maps(parse_args())


if __name__ == "__main__":
    main()
