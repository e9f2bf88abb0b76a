import json
from pathlib import Path

from click.testing import CliRunner

from balind.cli import cli
from balind.core.models import Block
from balind.factories.schemas import FactoryBinding

from builders import block_to_json, creation_tx, pool_id_for, pool_registered_log


def _write_block(tmp_path: Path, block: Block) -> Path:
    path = tmp_path / "block.json"
    path.write_text(json.dumps(block_to_json(block)))
    return path


def _json_lines(output: str) -> list[dict]:
    return [json.loads(line) for line in output.splitlines() if line.startswith("{")]


def test_map_components_command(tmp_path: Path, weighted_v1: FactoryBinding, pool: bytes, tokens: list[bytes]) -> None:
    tx = creation_tx(weighted_v1, pool=pool, call_tokens=tokens)
    path = _write_block(tmp_path, Block(number=5, hash=b"\x01" * 32, transactions=(tx,)))

    result = CliRunner().invoke(cli, ["map-components", str(path)])

    assert result.exit_code == 0, result.output
    records = _json_lines(result.output)
    assert len(records) == 1
    assert records[0]["id"] == "0x" + pool_id_for(pool).hex()
    assert records[0]["block_number"] == 5


def test_map_components_command_custom_protocol_name(
    tmp_path: Path, weighted_v1: FactoryBinding, pool: bytes, tokens: list[bytes]
) -> None:
    tx = creation_tx(weighted_v1, pool=pool, call_tokens=tokens)
    path = _write_block(tmp_path, Block(number=5, hash=b"\x01" * 32, transactions=(tx,)))

    result = CliRunner().invoke(cli, ["map-components", str(path), "--protocol-type-name", "balancer_v2_test"])

    assert result.exit_code == 0, result.output
    assert _json_lines(result.output)[0]["protocol_type"]["name"] == "balancer_v2_test"


def test_map_components_command_inconsistent_transaction(
    tmp_path: Path, weighted_v1: FactoryBinding, pool: bytes, tokens: list[bytes]
) -> None:
    tx = creation_tx(weighted_v1, pool=pool, call_tokens=tokens, register_pool=False)
    path = _write_block(tmp_path, Block(number=5, hash=b"\x01" * 32, transactions=(tx,)))

    result = CliRunner().invoke(cli, ["map-components", str(path)])

    assert result.exit_code == 1
    assert "PoolRegistered" in result.output


def test_map_components_command_lenient_correlation(
    tmp_path: Path, weighted_v1: FactoryBinding, pool: bytes, tokens: list[bytes]
) -> None:
    duplicate = pool_registered_log(pool_id_for(pool, nonce=9), pool)
    tx = creation_tx(weighted_v1, pool=pool, call_tokens=tokens, extra_vault_logs=(duplicate,))
    path = _write_block(tmp_path, Block(number=5, hash=b"\x01" * 32, transactions=(tx,)))

    strict = CliRunner().invoke(cli, ["map-components", str(path)])
    lenient = CliRunner().invoke(cli, ["map-components", str(path), "--lenient-correlation"])

    assert strict.exit_code == 1
    assert lenient.exit_code == 0, lenient.output
    assert _json_lines(lenient.output)[0]["id"] == "0x" + pool_id_for(pool).hex()


def test_map_components_command_invalid_document(tmp_path: Path) -> None:
    path = tmp_path / "block.json"
    path.write_text(json.dumps({"number": 1, "hash": "0x01"}))

    result = CliRunner().invoke(cli, ["map-components", str(path)])

    assert result.exit_code == 1
    assert "invalid trace document" in result.output


def test_map_components_command_unparseable_json(tmp_path: Path) -> None:
    path = tmp_path / "block.json"
    path.write_text('{"number": 1, "hash": ')

    result = CliRunner().invoke(cli, ["map-components", str(path)])

    assert result.exit_code == 1
    assert "invalid trace document" in result.output
    assert "Traceback" not in result.output


def test_factories_command() -> None:
    result = CliRunner().invoke(cli, ["factories"])

    assert result.exit_code == 0, result.output
    assert "Balancer v2 pool factories" in result.output
