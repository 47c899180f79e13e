from typing import List, Optional

from pydantic import BaseModel


class EncryptRequest(BaseModel):
    word: str
    key_value: Optional[int] = None
    group_size: Optional[int] = None
    number_of_possibilities: Optional[int] = None
    index_digit_number: Optional[int] = None
    start_index: Optional[int] = None


class EncryptResponse(BaseModel):
    word: str
    ciphertext: str
    groups: List[int]
