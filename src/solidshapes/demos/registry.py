from __future__ import annotations

import logging
from enum import StrEnum
from types import ModuleType
from typing import Optional, TextIO

from solidshapes.demos import dip, first_design, isp, lsp, ocp, srp

logger = logging.getLogger(__name__)


class DemoKey(StrEnum):
    FIRST_DESIGN = "first-design"
    SRP = "srp"
    OCP = "ocp"
    LSP = "lsp"
    ISP = "isp"
    DIP = "dip"


# Insertion order is the order run_all() uses
_REGISTRY: dict[DemoKey, ModuleType] = {
    DemoKey.FIRST_DESIGN: first_design,
    DemoKey.SRP: srp,
    DemoKey.OCP: ocp,
    DemoKey.LSP: lsp,
    DemoKey.ISP: isp,
    DemoKey.DIP: dip,
}


def get_demo(key: DemoKey | str) -> ModuleType:
    try:
        return _REGISTRY[DemoKey(key)]
    except ValueError:
        raise KeyError(f"No demo registered for key '{key}'") from None


def list_keys() -> list[str]:
    return [str(key) for key in _REGISTRY]


def run_demo(key: DemoKey | str, stream: Optional[TextIO] = None) -> None:
    demo = get_demo(key)
    logger.info(f"Running demo '{key}': {demo.TITLE}")
    demo.run(stream)


def run_all(stream: Optional[TextIO] = None) -> None:
    for key in _REGISTRY:
        run_demo(key, stream)
