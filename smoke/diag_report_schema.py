from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    ok = "ok"
    warn = "warn"
    error = "error"


class DiagCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    level: Severity
    details: str = ""


class DiagEnv(BaseModel):
    model_config = ConfigDict(extra="forbid")

    python: str
    platform: str
    cwd: str


class DiagConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str
    exists: bool
    include: bool = False
    dump: bool = False
    scriptDir: Optional[str] = None
    error: Optional[str] = None


class DiagBootstrap(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str
    exists: bool


class DiagReport(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tool_version: str
    env: DiagEnv
    config: DiagConfig
    bootstrap: DiagBootstrap
    checks: List[DiagCheck] = Field(default_factory=list)


__all__ = [
    "Severity", "DiagCheck", "DiagEnv", "DiagConfig", "DiagBootstrap", "DiagReport",
]
