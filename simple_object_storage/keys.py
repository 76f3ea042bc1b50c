"""オブジェクトキーの文法チェック

キーは `(セグメント "/")* ファイル名 "." 拡張子` の形式のみ許可する。
- セグメント / ファイル名: 英数字で始まり、英数字とハイフンのみ（1〜128文字）
- 拡張子: 英数字のみ（1〜128文字）

"." はファイル名と拡張子の区切りにしか現れないため、".." や絶対パスを
含むキーはすべて文法上拒否される。
"""

import re

_SEGMENT = r"[A-Za-z0-9][A-Za-z0-9-]{0,127}"
_EXTENSION = r"[A-Za-z0-9]{1,128}"

KEY_PATTERN = re.compile(rf"(?:{_SEGMENT}/)*{_SEGMENT}\.{_EXTENSION}")


def is_valid_key(key) -> bool:
    """キーが文法に一致するか判定する（全体一致）"""
    if not isinstance(key, str):
        return False
    return KEY_PATTERN.fullmatch(key) is not None
