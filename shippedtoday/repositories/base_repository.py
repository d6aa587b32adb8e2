from typing import List

from shippedtoday.models import Launch


class BaseRepository:
    """Interface shared by the launch storage backends"""

    def initialize(self) -> None:
        """Prepare the backing store"""

    def check_access(self) -> None:
        """Raise StorageError if the store cannot be read and written"""
        raise NotImplementedError

    def list_launches(self) -> List[Launch]:
        raise NotImplementedError

    def count(self) -> int:
        return len(self.list_launches())

    def add_launch(self, launch: Launch) -> None:
        raise NotImplementedError
