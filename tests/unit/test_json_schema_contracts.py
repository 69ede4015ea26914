"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных (FOUND и NO_MATCH)
- Детекция нарушений required полей
- Детекция нарушений типов и constraints
- Согласованность status и полезной нагрузки
- Интеграция с Pydantic моделями
"""

import json

import pytest
from jsonschema import ValidationError

from find_e.core.contracts import (
    ContractValidator,
    RatioSearchResultValidator,
    SchemaLoader,
    SeriesSearchResultValidator,
    validate_ratio_search_result,
    validate_series_search_result,
)
from find_e.core.domain import RatioSearchResult, SeriesSearchResult, ValueMatch
from find_e.search import find_best_ratio, find_best_series


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_series_result():
    """Валидный series_search_result (FOUND)."""
    return {
        "status": "FOUND",
        "max_error": 0.005,
        "series_index": 384,
        "worst_error": 0.0019,
        "matches": [
            {"original": 1.0, "matched": 1.0, "error": 0.0},
            {"original": 3.3, "matched": 3.298, "error": 0.0006},
            {"original": 9.9, "matched": 9.881, "error": 0.0019},
        ],
    }


@pytest.fixture
def valid_ratio_result():
    """Валидный ratio_search_result (FOUND)."""
    return {
        "status": "FOUND",
        "ratio": 0.2,
        "max_error": 0.01,
        "series_index": 24,
        "error": 0.0,
        "value1": 2.0,
        "value2": 10.0,
    }


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_all_schemas():
    """Проверка загрузки всех схем."""
    loader = SchemaLoader()

    series_schema = loader.load_schema("series_search_result")
    ratio_schema = loader.load_schema("ratio_search_result")

    assert series_schema["title"] == "SeriesSearchResult"
    assert ratio_schema["title"] == "RatioSearchResult"
    assert series_schema["additionalProperties"] is False


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("series_search_result")
    schema2 = loader.load_schema("series_search_result")

    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_rejects_missing_directory(tmp_path):
    with pytest.raises(RuntimeError):
        SchemaLoader(tmp_path / "missing")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    """Файл, не являющийся JSON Schema, отклоняется при загрузке."""
    (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
    loader = SchemaLoader(tmp_path)

    with pytest.raises(ValueError):
        loader.load_schema("broken")


# =============================================================================
# TESTS - SERIES SEARCH RESULT
# =============================================================================


def test_series_validator_accepts_valid_data(valid_series_result):
    validator = SeriesSearchResultValidator()
    validator.validate(valid_series_result)


def test_series_validate_function(valid_series_result):
    validate_series_search_result(valid_series_result)


def test_series_accepts_no_match():
    validate_series_search_result(
        {
            "status": "NO_MATCH",
            "max_error": 0.0,
            "series_index": None,
            "worst_error": None,
            "matches": [],
        }
    )


def test_series_rejects_missing_status(valid_series_result):
    data = valid_series_result.copy()
    del data["status"]

    with pytest.raises(ValidationError) as exc_info:
        validate_series_search_result(data)
    assert "'status' is a required property" in str(exc_info.value)


def test_series_rejects_found_without_index(valid_series_result):
    """FOUND обязан нести индекс ряда."""
    data = valid_series_result.copy()
    data["series_index"] = None

    with pytest.raises(ValidationError):
        validate_series_search_result(data)


def test_series_rejects_no_match_with_payload(valid_series_result):
    """NO_MATCH не несёт данных ряда."""
    data = valid_series_result.copy()
    data["status"] = "NO_MATCH"

    with pytest.raises(ValidationError):
        validate_series_search_result(data)


def test_series_rejects_negative_error(valid_series_result):
    data = valid_series_result.copy()
    data["worst_error"] = -0.1

    with pytest.raises(ValidationError):
        validate_series_search_result(data)


def test_series_rejects_zero_original(valid_series_result):
    data = valid_series_result.copy()
    data["matches"] = [{"original": 0.0, "matched": 1.0, "error": 0.0}]

    with pytest.raises(ValidationError):
        validate_series_search_result(data)


def test_series_rejects_extra_property(valid_series_result):
    data = valid_series_result.copy()
    data["series_name"] = "E384"

    with pytest.raises(ValidationError):
        validate_series_search_result(data)


def test_series_rejects_invalid_status(valid_series_result):
    data = valid_series_result.copy()
    data["status"] = "MAYBE"

    with pytest.raises(ValidationError):
        validate_series_search_result(data)


# =============================================================================
# TESTS - RATIO SEARCH RESULT
# =============================================================================


def test_ratio_validator_accepts_valid_data(valid_ratio_result):
    validator = RatioSearchResultValidator()
    validator.validate(valid_ratio_result)


def test_ratio_validate_function(valid_ratio_result):
    validate_ratio_search_result(valid_ratio_result)


def test_ratio_accepts_no_match():
    validate_ratio_search_result(
        {
            "status": "NO_MATCH",
            "ratio": 2.0,
            "max_error": 0.0,
            "series_index": None,
            "error": None,
            "value1": None,
            "value2": None,
        }
    )


def test_ratio_rejects_found_without_pair(valid_ratio_result):
    data = valid_ratio_result.copy()
    data["value2"] = None

    with pytest.raises(ValidationError):
        validate_ratio_search_result(data)


def test_ratio_rejects_zero_ratio(valid_ratio_result):
    data = valid_ratio_result.copy()
    data["ratio"] = 0.0

    with pytest.raises(ValidationError):
        validate_ratio_search_result(data)


def test_ratio_rejects_wrong_type(valid_ratio_result):
    data = valid_ratio_result.copy()
    data["series_index"] = "E24"

    with pytest.raises(ValidationError):
        validate_ratio_search_result(data)


# =============================================================================
# TESTS - PYDANTIC INTEGRATION
# =============================================================================


def test_series_model_generates_valid_json():
    """Сериализация SeriesSearchResult соответствует контракту."""
    result = find_best_series([1.0, 3.3, 9.9], 0.005)
    validate_series_search_result(result.model_dump(mode="json"))

    no_match = SeriesSearchResult.no_match(0.0)
    validate_series_search_result(no_match.model_dump(mode="json"))


def test_ratio_model_generates_valid_json():
    """Сериализация RatioSearchResult соответствует контракту."""
    result = find_best_ratio(0.2, 0.01)
    validate_ratio_search_result(result.model_dump(mode="json"))

    no_match = RatioSearchResult.no_match(2.0, -1.0)
    validate_ratio_search_result(no_match.model_dump(mode="json"))


def test_model_dump_roundtrips_through_json():
    result = SeriesSearchResult.found(
        max_error=0.01,
        series_index=3,
        worst_error=0.0,
        matches=(ValueMatch(original=4.7, matched=4.7, error=0.0),),
    )
    data = json.loads(json.dumps(result.model_dump(mode="json")))
    validate_series_search_result(data)
    assert SeriesSearchResult.model_validate(data) == result


def test_contract_validator_by_schema_name(valid_ratio_result):
    """Базовый валидатор работает с любой схемой по имени."""
    validator = ContractValidator("ratio_search_result")
    validator.validate(valid_ratio_result)

    with pytest.raises(ValidationError):
        validator.validate({**valid_ratio_result, "ratio": -1.0})

    with pytest.raises(FileNotFoundError):
        ContractValidator("non_existent_schema")
