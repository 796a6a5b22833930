# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

import pytest

from colorread.config import StoreConfig
from colorread.service import ReadingService
from colorread.store import SQLiteReadingStore


@pytest.fixture
def store():
    s = SQLiteReadingStore(StoreConfig(database_path=":memory:", retry_delay_s=0.0))
    s.open()
    s.migrate()
    yield s
    s.close()


@pytest.fixture
def service(store):
    return ReadingService(store)
