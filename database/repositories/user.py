from typing import List

from core.models import User
from database.repositories.base import BaseRepository


class UserRepository(BaseRepository):
    collection = 'users'

    def get_users(self) -> List[User]:
        return self._find_all(User)

    def save_user(self, user: User) -> None:
        """Upsert by id."""
        self.adapter.execute('updateOne', self.collection, {
            'filter': {'id': user.id},
            'update': {'$set': user.to_document()},
            'upsert': True,
        })

    def count(self) -> int:
        return self._count()
