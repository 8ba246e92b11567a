from wallet_chat.batch.config import BatchConfig
from wallet_chat.config.settings import Settings


def test_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("WALLET_CHAT_CONFIG_FILE", raising=False)
    s = Settings()
    assert s.api_base_url == "https://api.assisterr.ai"
    assert s.slm_model_id == "emu_otori"
    assert s.query_count == 10
    assert s.http_timeout == 30.0
    assert s.keys_file == "pk.txt"


def test_settings_yaml_and_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    cfg_file = tmp_path / "custom.yaml"
    cfg_file.write_text("query_count: 4\nslm_model_id: other_model\napi_base_url: https://x.test/\n", encoding="utf-8")
    monkeypatch.setenv("WALLET_CHAT_CONFIG_FILE", str(cfg_file))
    monkeypatch.setenv("QUERY_COUNT", "7")
    s = Settings()
    # 环境变量优先于 yaml
    assert s.query_count == 7
    assert s.slm_model_id == "other_model"
    assert s.api_base_url == "https://x.test"


def test_batch_config_from_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("WALLET_CHAT_CONFIG_FILE", raising=False)
    s = Settings(query_count=5, slm_model_id="m1")
    cfg = BatchConfig.from_settings(s, model_id="m2", query_count=None)
    assert cfg.query_count == 5
    assert cfg.model_id == "m2"
    assert cfg.endpoints.create_session_url(cfg.model_id) == "https://api.assisterr.ai/incentive/slm/m2/chat/create_session/"
    headers = cfg.browser_headers()
    assert headers["referer"] == "https://build.assisterr.ai/"
    assert "user-agent" in headers


def test_batch_config_clamps_query_count():
    assert BatchConfig(query_count=0).query_count == 1
    assert BatchConfig(query_count=500).query_count_clamped == 100
