from __future__ import annotations

import os

from file_explorer.config import Settings


def test_root_list_splits_and_absolutises(tmp_path):
    settings = Settings(allowed_roots=f' {tmp_path}/a , relative ,,')

    assert settings.root_list == [f'{tmp_path}/a', os.path.abspath('relative')]


def test_cors_origin_list_ignores_blanks():
    settings = Settings(cors_origins='https://a.example, ,https://b.example')

    assert settings.cors_origin_list == ['https://a.example', 'https://b.example']
    assert Settings(cors_origins='').cors_origin_list == []
