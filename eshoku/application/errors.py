class RoomNotFoundError(Exception):
    def __init__(self, room_id: int | str):
        self.room_id = room_id
        super().__init__(f"room {room_id} does not exist")


class UserNotFoundError(Exception):
    def __init__(self, sub: str):
        self.sub = sub
        super().__init__(f"no profile registered for {sub}")


class UserAlreadyExistsError(Exception):
    def __init__(self, sub: str):
        self.sub = sub
        super().__init__(f"profile for {sub} is already registered")


class SessionError(Exception):
    """Raised when the session cookie holds data that is not an identity."""
