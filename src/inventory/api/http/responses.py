"""Response envelopes shared by the product routes."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class MessageEnvelope(BaseModel):
    message: str


class DataEnvelope(BaseModel, Generic[T]):
    data: T


class MutationEnvelope(MessageEnvelope, Generic[T]):
    data: T
