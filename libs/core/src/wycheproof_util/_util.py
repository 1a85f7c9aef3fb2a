from __future__ import annotations
import sys


def is_android() -> bool:
    """
    True when the interpreter runs on an Android device.

    CPython 3.13+ reports ``sys.platform == "android"``; older on-device builds
    only expose ``sys.getandroidapilevel``.
    """
    if sys.platform == "android":
        return True
    return hasattr(sys, "getandroidapilevel")
