"""スコアの丸め処理。"""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """0.5を切り上げる四捨五入で整数に丸める。

    浮動小数点の誤差（50.49999999999999など）を吸収するため、
    小数第9位で一度丸めてから判定する。
    """
    return int(Decimal(repr(round(value, 9))).quantize(Decimal(1), rounding=ROUND_HALF_UP))
