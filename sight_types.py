from typing import Tuple

Point = Tuple[float, float]
IntPoint = Tuple[int, int]
