"""
地址搜尋
外部郵遞區號搜尋元件只透過 search_address() 介面接入
"""
from collections import deque
from typing import Iterable, Mapping, Optional, Protocol


class AddressSearcher(Protocol):
    def search_address(self) -> Optional[str]:
        ...


def format_postcode_address(result: Mapping[str, str]) -> str:
    """
    將郵遞區號搜尋結果組成顯示用地址

    道路名地址優先（沒有才用地番地址）；使用者選的是道路名地址時，
    在後面加上「(法定洞, 建物名稱)」。

    Args:
        result: 搜尋結果（roadAddress / jibunAddress / userSelectedType / bname / buildingName）

    Returns:
        完整地址字串
    """
    full_address = result.get("roadAddress") or result.get("jibunAddress") or ""

    if result.get("userSelectedType") == "R":
        extras = [
            value for value in (result.get("bname"), result.get("buildingName"))
            if value
        ]
        if extras:
            full_address += f" ({', '.join(extras)})"

    return full_address


class StaticAddressSearcher:
    """依序回傳排入的搜尋結果；用完後回傳 None"""

    def __init__(self, results: Iterable[Mapping[str, str]] = ()):
        self._results = deque(results)

    def add_result(self, result: Mapping[str, str]):
        """排入一筆搜尋結果（畫面上的地址查詢表單）"""
        self._results.append(result)

    def search_address(self) -> Optional[str]:
        if not self._results:
            return None
        return format_postcode_address(self._results.popleft())
