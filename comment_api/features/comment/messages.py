from enum import Enum


class Message(str, Enum):
    """Сообщения API комментариев"""
    INVALID_ID = "Invalid ID"
    BAD_REQUEST = "Bad Request"
    INTERNAL_SERVER_ERROR = "Internal Server Error"
    CREATE_SUCCESS = "Comment Created Successfully"
    FETCH_SUCCESS = "Comment Fetched Successfully"
    DELETE_SUCCESS = "Comment Deleted Successfully"
    UPDATE_SUCCESS = "Comment Updated Successfully"

    def __str__(self) -> str:
        return self.value
