#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import os
import subprocess
from typing import Optional
from .config import DepsConfig, create_config_from_args


def is_clone_root(config: DepsConfig) -> bool:
    """检查已存在的目录本身是否为 git 仓库根目录"""
    try:
        result = subprocess.run(
            config.toplevel_command(),
            check=True,
            capture_output=True,
            text=True,
        )
    except subprocess.CalledProcessError:
        return False
    # 空目录位于其他仓库内时，git 会返回外层仓库的根目录
    return os.path.realpath(result.stdout.strip()) == os.path.realpath(config.ax_root)


def clone_arceos(config: DepsConfig) -> bool:
    """克隆 arceos 仓库（目录已存在时跳过）"""
    if os.path.exists(config.ax_root):
        try:
            if not is_clone_root(config):
                print(f"{config.ax_root} 已存在但不是 git 仓库，请删除后重试")
                return False
        except Exception as e:
            print(f"检查 {config.ax_root} 过程中发生错误: {e}")
            return False
        print(f"{config.ax_root} 文件夹已存在")
        return True

    print("正在克隆 arceos 仓库...")
    try:
        subprocess.run(
            config.clone_command(),
            check=True,
            capture_output=True,
            text=True,
        )
        print("arceos 仓库克隆完成")
        return True
    except subprocess.CalledProcessError as e:
        print(f"克隆 arceos 仓库失败: {e}")
        print(f"错误输出: {e.stderr}")
        return False
    except Exception as e:
        print(f"克隆 arceos 过程中发生错误: {e}")
        return False


def sync_revision(config: DepsConfig) -> bool:
    """将工作区重置到指定提交或切换到指定分支"""
    if config.mode == "branch":
        failure = f"切换到分支 {config.branch} 失败，请检查仓库"
    else:
        failure = f"重置到提交 {config.commit} 失败，请检查仓库"

    try:
        subprocess.run(
            config.sync_command(),
            check=True,
            capture_output=True,
            text=True,
        )
        print(f"arceos 已同步到 {config.revision}")
        return True
    except subprocess.CalledProcessError as e:
        print(failure)
        print(f"错误输出: {e.stderr}")
        return False
    except Exception as e:
        print(f"{failure}: {e}")
        return False


def run_set_root(config: DepsConfig) -> bool:
    """调用下游脚本记录 arceos 目录"""
    cmd = config.set_root_command()
    try:
        subprocess.run(cmd, check=True)
        return True
    except subprocess.CalledProcessError as e:
        print(f"设置 AX_ROOT 失败，退出码: {e.returncode}")
        return False
    except Exception as e:
        print(f"设置 AX_ROOT 过程中发生错误: {e}")
        return False


def setup_arceos(config: Optional[DepsConfig] = None) -> bool:
    """设置 arceos 依赖"""
    if config is None:
        config = DepsConfig()

    if not clone_arceos(config):
        return False
    if not sync_revision(config):
        return False
    return run_set_root(config)


def main(args=None):
    """作为独立命令使用时的入口"""
    print("执行 setup 功能...")
    try:
        config = create_config_from_args(args) if args is not None else DepsConfig()
    except ValueError as e:
        print(f"配置错误: {e}")
        return 1
    return 0 if setup_arceos(config) else 1
