"""
Configuration, Settings and Store Tests

EngineConfig validation and sectioned loading, environment settings, and the
JSON-backed in-memory stores.

Run:
----
    pytest tests/test_config.py -v
"""

import json

import pytest
from pydantic import ValidationError

from match_engine.models import DEFAULT_CONFIG, EngineConfig, PositionKind, load_config
from match_engine.models.config import BucketThresholds, FitWeights, SimilarityWeights
from match_engine.settings import EngineSettings
from match_engine.stores import InMemoryApplicationStore, InMemoryPositionStore


class TestEngineConfig:
    """Defaults, validation and from_dict()."""

    def test_defaults(self):
        config = EngineConfig()
        assert config.similarity_weights.skills == 0.40
        assert config.similarity_weights.duration == 0.10
        assert config.fit_weights.as_dict() == {
            "skills": 0.40,
            "experience": 0.25,
            "education": 0.15,
            "location": 0.10,
            "history": 0.10,
        }
        assert config.decision.rbf_gamma == 1.5
        assert config.popular_fallback_score == 50

    def test_similarity_weights_must_sum_to_one(self):
        with pytest.raises(ValidationError):
            SimilarityWeights(skills=0.5)

    def test_fit_weights_must_sum_to_one(self):
        with pytest.raises(ValidationError):
            FitWeights(history=0.5)

    def test_buckets_must_ascend(self):
        with pytest.raises(ValidationError):
            BucketThresholds(salary=(600000, 300000, 1000000))

    def test_pool_limits_within_max(self):
        with pytest.raises(ValidationError):
            EngineConfig(max_pool_size=50)

    def test_from_dict_sections(self):
        config = EngineConfig.from_dict({
            "similarity": {
                "weights": {"skills": 0.5, "compensation": 0.2},
                "default_k": 3,
            },
            "preference": {"buckets": {"stipend": [1000, 2000, 3000]}},
            "screening": {"decision": {"rbf_gamma": 2.0}, "missing_skill_penalty": 0.1},
            "pools": {"max_pool_size": 1000},
            "unknown_key": True,
        })
        assert config.similarity_weights.skills == 0.5
        assert config.default_k == 3
        assert config.buckets.stipend == (1000, 2000, 3000)
        assert config.buckets.salary == DEFAULT_CONFIG.buckets.salary
        assert config.decision.rbf_gamma == 2.0
        assert config.decision.sigmoid_steepness == 8.0
        assert config.missing_skill_penalty == 0.1
        assert config.max_pool_size == 1000

    def test_from_dict_top_level_keys(self):
        config = EngineConfig.from_dict({"default_k": 7})
        assert config.default_k == 7

    def test_load_config(self, tmp_path):
        path = tmp_path / "engine.json"
        path.write_text(json.dumps({"pools": {"similar_pool_limit": 20}}))
        assert load_config(path).similar_pool_limit == 20

    def test_load_config_none_is_default(self):
        assert load_config(None) is DEFAULT_CONFIG

    def test_load_config_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.json")


class TestEngineSettings:
    """Environment-driven settings."""

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("MATCH_ENGINE_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("MATCH_ENGINE_LOG_LEVEL", "debug")
        monkeypatch.delenv("MATCH_ENGINE_CONFIG", raising=False)
        settings = EngineSettings.from_env()
        assert settings.data_dir == tmp_path
        assert settings.log_level == "DEBUG"
        assert settings.config_path is None
        assert settings.load_engine_config() is DEFAULT_CONFIG

    def test_config_path(self, monkeypatch, tmp_path):
        path = tmp_path / "engine.json"
        path.write_text(json.dumps({"default_k": 2}))
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("MATCH_ENGINE_CONFIG", str(path))
        assert EngineSettings.from_env().load_engine_config().default_k == 2


class TestStores:
    """In-memory stores."""

    def test_from_json(self, tmp_path, raw_records):
        path = tmp_path / "positions.json"
        path.write_text(json.dumps(raw_records["positions"]))
        store = InMemoryPositionStore.from_json(path)
        assert store.get_position("int_ml", PositionKind.INTERNSHIP).duration == 3
        assert store.get_position("int_ml", PositionKind.JOB) is None

    def test_from_json_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            InMemoryPositionStore.from_json(tmp_path / "positions.json")

    def test_list_positions(self, raw_records):
        store = InMemoryPositionStore(raw_records["positions"])
        active = store.list_positions(PositionKind.JOB)
        assert "job_closed" not in [p.id for p in active]
        everything = store.list_positions(PositionKind.JOB, active_only=False)
        assert len(everything) == 5
        capped = store.list_positions(PositionKind.JOB, limit=2, exclude_ids=["job_py_blr"])
        assert [p.id for p in capped] == ["job_py_blr_2", "job_java_pune"]

    def test_application_order(self, raw_records):
        store = InMemoryApplicationStore(raw_records["applications"])
        by_position = store.applications_for_position("job_py_blr", PositionKind.JOB)
        assert [a.candidate_id for a in by_position] == ["cand_strong", "cand_match", "cand_weak"]
        by_candidate = store.applications_for_candidate("cand_match", PositionKind.JOB)
        assert [a.position_id for a in by_candidate] == ["job_py_blr"]
