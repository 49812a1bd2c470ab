#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import argparse
import sys
import importlib
from .config import add_common_arguments


def main():
    parser = argparse.ArgumentParser(description="arceos 依赖管理工具")
    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    # setup 命令
    setup_parser = subparsers.add_parser("setup", help="克隆并同步 arceos 依赖")
    add_common_arguments(setup_parser)

    # set_ax_root 命令
    set_root_parser = subparsers.add_parser(
        "set_ax_root", help="将 arceos 目录写入 .cargo/config.toml"
    )
    set_root_parser.add_argument("ax_root", type=str, help="arceos 目录")

    args = parser.parse_args()

    if args.command == "setup":
        mod = importlib.import_module("axdeps.setup")
        exit_code = mod.main(args)
        sys.exit(exit_code)
    elif args.command == "set_ax_root":
        mod = importlib.import_module("axdeps.set_ax_root")
        exit_code = mod.main(args)
        sys.exit(exit_code)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
