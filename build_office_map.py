#!/usr/bin/env python3
from goc_office_map.cli import parse_args
from goc_office_map.build import build_maps

def main():
    args = parse_args()
    build_maps(args)

if __name__ == "__main__":
    main()
