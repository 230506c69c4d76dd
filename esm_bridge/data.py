"""Payload records and the `Data` union carried by every message.

On the wire a payload is `{"type": "<variant>", "content": {...}}`, with
`content` absent for `empty`. Inside the game server it becomes a hash map of
the record's fields (see `to_host_value`).
"""
from __future__ import annotations

from datetime import UTC, datetime
from types import MappingProxyType
from typing import Annotated, Any, Literal, TypeVar

from pydantic import AfterValidator, AwareDatetime, BaseModel, ConfigDict, Field, PlainSerializer, TypeAdapter

from esm_bridge.host import HostValue, host_value_of

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]
UtcDatetime = Annotated[AwareDatetime, AfterValidator(lambda ts: ts.astimezone(UTC))]
# Read-only view; serialized back to a plain dict.
FrozenStrMap = Annotated[
    dict[str, str],
    AfterValidator(MappingProxyType),
    PlainSerializer(dict, return_type=dict[str, str]),
]


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)


class Test(Record):
    """Diagnostic payload."""

    __test__ = False

    foo: str


class Init(Record):
    """Server bootstrap snapshot, sent once at startup."""

    server_name: str
    price_per_object: float
    territory_lifetime: float
    territory_data: str
    server_start_time: UtcDatetime
    extension_version: str


class PostInit(Record):
    """Feature, tax and logging configuration, sent once initialization is done."""

    extdb_path: str

    gambling_modifier: Int64
    gambling_payout: Int64
    gambling_randomizer_max: float
    gambling_randomizer_mid: float
    gambling_randomizer_min: float
    gambling_win_chance: Int64

    logging_add_player_to_territory: bool
    logging_demote_player: bool
    logging_exec: bool
    logging_gamble: bool
    logging_modify_player: bool
    logging_pay_territory: bool
    logging_promote_player: bool
    logging_remove_player_from_territory: bool
    logging_reward: bool
    logging_transfer: bool
    logging_upgrade_territory: bool

    max_payment_count: Int64
    territory_payment_tax: Int64
    territory_upgrade_tax: Int64

    # Display/priority order; duplicates are kept as sent.
    territory_admins: tuple[str, ...]


class Query(Record):
    """Generic request handled by the host.

    `name` is deliberately free-form so the host can add query kinds without a
    protocol bump. Names in use today:

    - territory (territory_id): a single territory
    - territories (uid): territories the uid belongs to; no arguments lists all
    - player_info_account_only, leaderboard, leaderboard_deaths, leaderboard_score
    - restore, reset_player, reset_all
    - get_territory_id_from_hash, set_custom_territory_id, get_hash_from_id
    - get_payment_count, increment_payment_counter, reset_payment_counter
    """

    name: str
    arguments: FrozenStrMap


class Event(Record):
    """Something that happened on the server, with its wall-clock time."""

    event_type: str
    triggered_at: UtcDatetime

    @staticmethod
    def now(*, event_type: str) -> "Event":
        return Event(event_type=event_type, triggered_at=datetime.now(UTC))


class _Variant(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)


class DataEmpty(_Variant):
    type: Literal["empty"] = "empty"


class DataTest(_Variant):
    type: Literal["test"] = "test"
    content: Test


class DataInit(_Variant):
    type: Literal["init"] = "init"
    content: Init


class DataPostInit(_Variant):
    type: Literal["post_init"] = "post_init"
    content: PostInit


class DataQuery(_Variant):
    type: Literal["query"] = "query"
    content: Query


Data = Annotated[
    DataEmpty | DataTest | DataInit | DataPostInit | DataQuery,
    Field(discriminator="type"),
]

DATA_ADAPTER: TypeAdapter[Data] = TypeAdapter(Data)

# Record type -> the union member that carries it.
VARIANTS: dict[type[Record], type[_Variant]] = {
    Test: DataTest,
    Init: DataInit,
    PostInit: DataPostInit,
    Query: DataQuery,
}

R = TypeVar("R", bound=Record)


def default_data() -> DataEmpty:
    return DataEmpty()


def variant_name(data: Data) -> str:
    return data.type


def variant_for(record_type: type[Record]) -> type[_Variant]:
    variant = VARIANTS.get(record_type)
    if variant is None:
        raise TypeError(f"{record_type.__name__} is not carried by Data")
    return variant


def tag_for(record_type: type[Record]) -> str:
    return variant_for(record_type).model_fields["type"].default


def wrap(record: Record) -> Data:
    return variant_for(type(record))(content=record)


def to_host_value(data: Data | Record) -> HostValue:
    """Convert a payload into the host representation.

    `empty` becomes an empty map rather than nil. Any other variant becomes a
    map of its record's fields, names verbatim; the variant tag is left to the
    wire encoding. Bare records (e.g. `Event`) convert the same way.
    """

    if isinstance(data, DataEmpty):
        return {}
    if isinstance(data, _Variant):
        return host_value_of(data.content)
    return host_value_of(data)


def encode_data(data: Data) -> str:
    return DATA_ADAPTER.dump_json(data).decode("utf-8")


def decode_data(raw: str | bytes) -> Data:
    """Decode a wire payload. Raises `pydantic.ValidationError` on bad input."""

    return DATA_ADAPTER.validate_json(raw)


def to_wire(data: Data) -> dict[str, Any]:
    if isinstance(data, DataEmpty):
        return {"type": data.type}
    return {"type": data.type, "content": to_host_value(data)}
