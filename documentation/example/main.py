from pathlib import Path

from sources.repositories.user_repository import UserRepository
from sources.storage import JSONUserStorage


def main():
    storage = JSONUserStorage(Path(__file__).parent / "users.json")
    users = UserRepository(storage).find_all()
    print("Loaded:", users.is_initialized, sep=" ")

    for user in users:
        print("User:", user.model_dump_json(), sep=" ")

    print("Loaded:", users.is_initialized, sep=" ")


if __name__ == "__main__":
    main()
