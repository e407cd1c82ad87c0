"""構造ルール定義のデータモデル。"""

from collections.abc import Callable, Sequence
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from systemcraft.models.graph import Connection, Node

Severity = Literal["critical", "warning", "info"]


class CheckResult(BaseModel):
    """ルール判定関数の戻り値。"""

    passed: bool
    message: str


RuleCheck = Callable[[Sequence[Node], Sequence[Connection], Sequence[str], Sequence[str]], CheckResult]


class Rule(BaseModel):
    """重み付きの構造ルール。

    ``description`` が利用者に表示されるルール名となる。
    """

    model_config = ConfigDict(frozen=True)

    id: str
    description: str
    weight: float = Field(gt=0)
    severity: Severity
    check: RuleCheck
