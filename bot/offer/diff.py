"""
거래 제안 인벤토리 차이 계산

제안에 첨부된 양측 아이템 사전("dict")으로 SKU별 변화량을 계산.
양수는 받는 수량, 음수는 주는 수량.
"""

from typing import Mapping

from adapters.interfaces import ITradeOffer


OFFER_DICT_KEY = "dict"


def compute_diff(
    our: Mapping[str, int],
    their: Mapping[str, int],
) -> dict[str, int]:
    """SKU별 (상대 수량 - 우리 수량)

    한쪽에만 있는 SKU는 다른 쪽 수량을 0으로 본다.
    """
    diff: dict[str, int] = {}

    for sku, amount in our.items():
        diff[sku] = diff.get(sku, 0) - amount

    for sku, amount in their.items():
        diff[sku] = diff.get(sku, 0) + amount

    return diff


def get_diff(offer: ITradeOffer) -> dict[str, int] | None:
    """제안의 SKU별 차이 (첨부된 아이템 사전이 없으면 None)"""
    sides = offer.data(OFFER_DICT_KEY)

    if sides is None:
        return None

    return compute_diff(sides.get("our") or {}, sides.get("their") or {})
