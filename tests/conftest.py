import struct

import pytest


def make_bundle(size=5012, total=2000, head=76, granularity=1 << 20,
                declared_count=None, block_sizes=None, size2=None, total2=None,
                first_file_encode=0, unk10=0, unk28=(0, 0, 0, 0), payload=b''):
    if block_sizes is None:
        block_sizes = [total]
    if declared_count is None:
        declared_count = len(block_sizes)
    buf = bytearray(60)
    struct.pack_into('<III', buf, 0, size, total, head)
    struct.pack_into('<II', buf, 12, first_file_encode, unk10)
    struct.pack_into('<QQ', buf, 20,
                     size if size2 is None else size2,
                     total if total2 is None else total2)
    struct.pack_into('<II', buf, 36, declared_count, granularity)
    struct.pack_into('<4I', buf, 44, *unk28)
    buf += struct.pack(f'<{len(block_sizes)}I', *block_sizes)
    return bytes(buf) + payload


class FakeResponse:
    def __init__(self, status_code=200, content=b'', headers=None):
        self.status_code = status_code
        self.content = content
        self.headers = headers or {}


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def get(self, url, headers=None):
        self.calls.append((url, headers))
        return self.response


@pytest.fixture
def bundle_bytes():
    return make_bundle()
