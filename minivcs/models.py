from pathlib import Path
from typing import Literal, TypeAlias

from pydantic import BaseModel, ConfigDict

class StagedFile(BaseModel):
    path: str
    hash: str

class Commit(BaseModel):
    model_config = ConfigDict(frozen=True)

    hash: str
    message: str
    timestamp: str
    files: list[str]
    parent: str | None = None   # parent commit hash, None for a root commit

BranchInfo: TypeAlias = dict[str, str]
StagingInfo: TypeAlias = list[StagedFile]

class HeadInfo(BaseModel):
    type: Literal["commit", "empty"]
    value: str  # commit hash, or "" when there are no commits yet

class RepoState(BaseModel):
    model_config = ConfigDict(frozen=True)

    root: Path
    head: str | None
    currentBranch: str
    staging: list[StagedFile]

class StatusReport(BaseModel):
    branch: str
    head: str | None
    staged: list[StagedFile]
    modified: list[str]

class CheckoutResult(BaseModel):
    commit: Commit
    restored: list[str]
    missing: list[str]

class BranchEntry(BaseModel):
    name: str
    target: str
    current: bool
