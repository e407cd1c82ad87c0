"""SystemCraftのカスタム例外クラス。"""


class SystemCraftError(Exception):
    """SystemCraftの基底例外クラス。"""


class ConfigurationError(SystemCraftError):
    """設定ファイルの読み込みエラー。"""


class UnknownDifficultyError(SystemCraftError):
    """未定義の難易度が指定された場合の例外。"""

    def __init__(self, difficulty: str) -> None:
        super().__init__(f"Unknown difficulty: {difficulty}")
        self.difficulty = difficulty


class InvalidDesignError(SystemCraftError):
    """ノード・接続の形式が不正な場合の例外。"""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid design: {detail}")
        self.detail = detail


class EmptyDesignError(SystemCraftError):
    """コンポーネントが一つもないキャンバスを採点しようとした場合の例外。"""

    def __init__(self) -> None:
        super().__init__("Cannot evaluate an empty canvas. Add components before submitting.")
