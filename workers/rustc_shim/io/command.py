"""
ComposedCommand — the fully built compiler call handed to the launcher.
"""
import shlex
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ComposedCommand(BaseModel):
    """Program, full argument vector and environment overrides."""

    model_config = ConfigDict(frozen=True)

    program: str
    args: Tuple[str, ...] = ()
    env: Dict[str, str] = Field(default_factory=dict)   # overrides only

    def argv(self) -> List[str]:
        return [self.program, *self.args]

    def render(self) -> str:
        """Shell-style rendering for logs and diagnostics."""
        assignments = [f"{k}={shlex.quote(v)}" for k, v in sorted(self.env.items())]
        return " ".join(assignments + [shlex.join(self.argv())])
