"""
JSON report schema for `tpi --json`.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .types import RunResult
from .version import tool_version


class RunReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    version: str = Field(default_factory=tool_version)
    file_count: int = Field(alias="fileCount", ge=0)
    failed_files: int = Field(alias="failedFiles", ge=0)
    packages: List[str]
    elapsed: float = Field(ge=0, description="wall time in seconds")

    @classmethod
    def from_result(cls, result: RunResult, elapsed: float) -> "RunReport":
        return cls(
            file_count=result.file_count,
            failed_files=result.failed_files,
            packages=result.sorted_packages(),
            elapsed=round(elapsed, 6),
        )


__all__ = ["RunReport"]
