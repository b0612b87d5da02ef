"""
流程通用工具：告警输出与文件路径辅助。
"""

from __future__ import annotations

import os
import sys


def warn(message: str) -> None:
    """输出非致命告警（不中断流程）。"""
    print(f"Warning: {message}", file=sys.stderr)


def require_file(path: str, what: str) -> str:
    """校验文件存在，不存在时以可读错误退出。"""
    if not os.path.isfile(path):
        raise SystemExit(f"Error: {what} not found: {path}")
    return path
