from uuid import UUID

from lazycollection import ArrayCollection, Collection, LazyCollection

from ..models import User
from ..storage import AbstractUserStorage


class UserRepository:
    def __init__(self, storage: AbstractUserStorage):
        self.__storage = storage

    def find_all(self) -> LazyCollection[UUID, User]:
        return LazyCollection(self.__load)

    def find_active(self) -> Collection[UUID, User]:
        return self.find_all().filter(lambda _, user: user.is_active)

    def __load(self) -> ArrayCollection[UUID, User]:
        users = (User.model_validate(row) for row in self.__storage.fetch_all())
        return ArrayCollection({user.id: user for user in users})
