from abc import ABC, abstractmethod
from src.domain.entities.user import User

class UserRepository(ABC):
    @abstractmethod
    def get_by_ids(self, user_ids: list[str]) -> list[User]:
        pass
