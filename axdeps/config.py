#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import os
import sys
import shlex
import argparse
from typing import Dict, List, Optional, Any
from dataclasses import dataclass

DEFAULT_CONFIG_FILE = ".axdeps.toml"
DEFAULT_AX_ROOT = ".arceos"
DEFAULT_URL = "https://github.com/MF-B/arceos"
DEFAULT_COMMIT = "a59b6b8"


def default_set_root_cmd() -> List[str]:
    # 与本文件同目录的 set_ax_root.py，不依赖当前工作目录
    script = os.path.join(os.path.dirname(os.path.abspath(__file__)), "set_ax_root.py")
    return [sys.executable, script]


@dataclass
class DepsConfig:
    """arceos 依赖配置类，存储所有合并后的配置参数"""

    ax_root: str = DEFAULT_AX_ROOT
    url: str = DEFAULT_URL
    commit: Optional[str] = None
    branch: Optional[str] = None
    set_root_cmd: List[str] = None

    def __post_init__(self):
        """初始化后处理，补全默认值并检查提交与分支不能同时指定"""
        if self.set_root_cmd is None:
            self.set_root_cmd = default_set_root_cmd()
        if self.commit and self.branch:
            raise ValueError(
                f"不能同时指定提交 {self.commit} 和分支 {self.branch}"
            )
        if not self.commit and not self.branch:
            self.commit = DEFAULT_COMMIT

    @property
    def mode(self) -> str:
        return "branch" if self.branch else "commit"

    @property
    def revision(self) -> str:
        return self.branch if self.branch else self.commit

    def clone_command(self) -> List[str]:
        return ["git", "clone", self.url, self.ax_root]

    def toplevel_command(self) -> List[str]:
        return ["git", "-C", self.ax_root, "rev-parse", "--show-toplevel"]

    def sync_command(self) -> List[str]:
        """提交模式执行 reset --hard，分支模式执行 checkout"""
        if self.mode == "branch":
            return ["git", "-C", self.ax_root, "checkout", self.branch]
        return ["git", "-C", self.ax_root, "reset", "--hard", self.commit]

    def set_root_command(self) -> List[str]:
        # 下游脚本只接收一个参数：依赖目录
        return list(self.set_root_cmd) + [self.ax_root]


def load_config_file(config_path: str = DEFAULT_CONFIG_FILE) -> Dict[str, Any]:
    """从配置文件加载配置"""
    if os.path.exists(config_path):
        try:
            import toml

            with open(config_path, "r", encoding="utf-8") as f:
                return toml.load(f)
        except Exception as e:
            print(f"警告：读取配置文件 {config_path} 失败: {e}")
            return {}
    return {}


def string_or_array_to_list(value: Any) -> List[str]:
    """将字符串或数组转换为命令参数列表"""
    if value is None:
        return []
    elif isinstance(value, list):
        # 过滤掉空字符串
        return [str(v) for v in value if v]
    elif isinstance(value, str):
        return shlex.split(value)
    else:
        return [str(value)] if value else []


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """为解析器添加通用参数"""
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=DEFAULT_CONFIG_FILE,
        help=f"Config file (default: {DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument(
        "--ax-root",
        type=str,
        help=f"Directory of the arceos working copy (default: {DEFAULT_AX_ROOT})",
    )
    parser.add_argument("--url", type=str, help="Remote arceos repository")
    revision = parser.add_mutually_exclusive_group()
    revision.add_argument(
        "--commit", type=str, help=f"Commit to reset to (default: {DEFAULT_COMMIT})"
    )
    revision.add_argument("--branch", type=str, help="Branch to checkout")


def create_config_from_args(args: argparse.Namespace) -> DepsConfig:
    """从命令行参数和配置文件创建配置对象"""
    config_file = load_config_file(getattr(args, "config", None) or DEFAULT_CONFIG_FILE)

    values: Dict[str, Any] = {}

    # 合并配置文件参数（配置文件优先级较低）
    for key in ("ax_root", "url", "commit", "branch"):
        if config_file.get(key):
            values[key] = str(config_file[key])

    if "set_root_cmd" in config_file:
        cmd = string_or_array_to_list(config_file["set_root_cmd"])
        if cmd:
            values["set_root_cmd"] = cmd

    # 合并命令行参数（命令行参数优先级较高）
    if getattr(args, "ax_root", None):
        values["ax_root"] = args.ax_root

    if getattr(args, "url", None):
        values["url"] = args.url

    # 上层指定的分支会覆盖下层的提交，反之亦然
    if getattr(args, "commit", None):
        values["commit"] = args.commit
        values.pop("branch", None)
    elif getattr(args, "branch", None):
        values["branch"] = args.branch
        values.pop("commit", None)

    return DepsConfig(**values)
