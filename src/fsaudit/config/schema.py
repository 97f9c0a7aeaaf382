"""Platform schema — the well-known paths a scan needs, fixed for the whole run."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import List, Literal

OsName = Literal["nt", "posix", "darwin"]


@dataclass(frozen=True)
class PlatformPaths:
    """Well-known directories of the current machine and user.

    ``system_root`` and ``temp_dir`` are the blacklist roots.
    """

    separator: str
    system_root: str
    user_home: str
    app_data: str
    temp_dir: str
    os_name: OsName = "posix"

    @property
    def is_windows(self) -> bool:
        return self.os_name == "nt"

    def drive_roots(self) -> List[str]:
        """Every root a full scan covers, in scan order.

        Windows: one root per drive letter, ``A:\\`` through ``Z:\\``.
        Elsewhere there is a single filesystem root.
        """
        if self.is_windows:
            return [f"{letter}:{self.separator}" for letter in string.ascii_uppercase]
        return [self.separator]
