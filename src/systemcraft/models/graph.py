"""アーキテクチャ図（ノード・接続）と設問のデータモデル。"""

from pydantic import BaseModel, ConfigDict, Field


class Node(BaseModel):
    """キャンバス上に配置されたアーキテクチャコンポーネント。

    ``type`` は評価エンジン側では自由な文字列タグとして扱う。
    座標・アイコンは描画用であり、評価には使用しない。
    """

    id: str
    type: str
    label: str | None = None
    icon: str | None = None
    x: float = 0
    y: float = 0


class Connection(BaseModel):
    """ノード間の有向接続。"""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    source: str = Field(alias="from")
    target: str = Field(alias="to")


class TrafficProfile(BaseModel):
    """設問のトラフィック規模。"""

    users: str | None = None
    rps: str | None = None
    storage: str | None = None


class Question(BaseModel):
    """面接の設問。ルール評価では requirements / constraints のみ参照する。"""

    model_config = ConfigDict(populate_by_name=True)

    prompt: str = ""
    requirements: list[str] = Field(default_factory=list)
    constraints: list[str] = Field(default_factory=list)
    traffic_profile: TrafficProfile = Field(default_factory=TrafficProfile, alias="trafficProfile")
    hints: list[str] = Field(default_factory=list)
