from __future__ import annotations

import os
from collections.abc import Generator
from datetime import UTC, datetime
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from esm_bridge import data


@pytest.fixture(scope="session", autouse=True)
def _load_dotenv_for_tests() -> None:
    """Load repo .env for local runs.

    In CI we don't auto-load `.env` so settings tests see a clean environment.
    Opt-in with: ESM_LOAD_DOTENV_FOR_TESTS=1
    """

    if os.environ.get("CI") and os.environ.get("ESM_LOAD_DOTENV_FOR_TESTS") != "1":
        return

    env_path = Path(__file__).resolve().parents[1] / ".env"
    if env_path.exists():
        from dotenv import load_dotenv

        load_dotenv(dotenv_path=env_path, override=False)


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    from esm_bridge.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture()
def start_time() -> datetime:
    return datetime(2024, 3, 1, 18, 30, 5, tzinfo=UTC)


@pytest.fixture()
def init_record(start_time: datetime) -> data.Init:
    return data.Init(
        server_name="Server1",
        price_per_object=1.5,
        territory_lifetime=30.0,
        territory_data="std",
        server_start_time=start_time,
        extension_version="1.0.0",
    )


@pytest.fixture()
def post_init_record() -> data.PostInit:
    return data.PostInit(
        extdb_path="/srv/arma/@ExileServer/extdb-conf.ini",
        gambling_modifier=1,
        gambling_payout=300,
        gambling_randomizer_max=1.0,
        gambling_randomizer_mid=0.5,
        gambling_randomizer_min=0.0,
        gambling_win_chance=35,
        logging_add_player_to_territory=True,
        logging_demote_player=True,
        logging_exec=False,
        logging_gamble=True,
        logging_modify_player=True,
        logging_pay_territory=False,
        logging_promote_player=True,
        logging_remove_player_from_territory=True,
        logging_reward=False,
        logging_transfer=True,
        logging_upgrade_territory=False,
        max_payment_count=5,
        territory_payment_tax=10,
        territory_upgrade_tax=15,
        territory_admins=("76561198037177305", "76561197960287930", "76561198037177305"),
    )


@pytest.fixture()
def query_record() -> data.Query:
    return data.Query(name="territories", arguments={"uid": "76561197960287930"})
