from fastapi import status
from .base import build_response


def success_response(message: str = None, data=None):
    return build_response(status.HTTP_200_OK, True, message=message, data=data)


def data_response(data=None, message: str = None):
    return build_response(status.HTTP_200_OK, True, message=message, data=data)


def created_response(data=None, message: str = None):
    return build_response(status.HTTP_201_CREATED, True, message=message, data=data)
