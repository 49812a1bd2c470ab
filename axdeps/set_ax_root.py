#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import os
import sys

TEMPLATE_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.toml.temp")
CARGO_CONFIG = os.path.join(".cargo", "config.toml")


def set_ax_root(ax_root: str, output: str = CARGO_CONFIG) -> bool:
    """将 arceos 目录写入 cargo 配置"""
    if not os.path.isdir(ax_root):
        print(f"目录 {ax_root} 不存在或不是目录")
        return False

    ax_root = os.path.abspath(ax_root)
    try:
        with open(TEMPLATE_FILE, "r", encoding="utf-8") as f:
            content = f.read().replace("%AX_ROOT%", ax_root)

        out_dir = os.path.dirname(output)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        print(f"写入 {output} 失败: {e}")
        return False

    print(f"设置 AX_ROOT (ArceOS 目录) 为 {ax_root}")
    return True


def main(args=None):
    """作为独立命令使用时的入口"""
    return 0 if set_ax_root(args.ax_root) else 1


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(f"用法: {sys.argv[0]} <AX_ROOT>")
        sys.exit(1)
    sys.exit(0 if set_ax_root(sys.argv[1]) else 1)
