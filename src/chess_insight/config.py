"""Centralized application configuration.

All settings are read from environment variables prefixed with
CHESS_INSIGHT_ (or a .env.chess-insight file). Nothing is required;
every setting has a working default.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from chess_insight.analysis.constants import AnalysisOptions


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHESS_INSIGHT_",
        env_file=".env.chess-insight", env_file_encoding="utf-8",
    )

    # Move-type tagging: a fianchettoed bishop that is attacked reports
    # "fianchetto" when True, "attacking" when False
    fianchetto_overrides_attacking: bool = True

    # Optional tactic finders
    detect_double_checks: bool = True
    detect_traps: bool = True

    log_level: str = "WARNING"

    def analysis_options(self) -> AnalysisOptions:
        return AnalysisOptions(
            fianchetto_overrides_attacking=self.fianchetto_overrides_attacking,
            detect_double_checks=self.detect_double_checks,
            detect_traps=self.detect_traps,
        )
