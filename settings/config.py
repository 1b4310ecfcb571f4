from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import os


@dataclass
class AppConfig:
    root: Path
    logs_dir: Path
    data_dir: Path
    contacts_json: Path
    exports_dir: Path

    @classmethod
    def load(cls) -> "AppConfig":
        root = Path(__file__).resolve().parents[1]
        data_dir = root / "db"

        def env_path(var: str, default: Path) -> Path:
            v = os.getenv(var)
            if not v:
                return default
            p = Path(v).expanduser()
            return p if p.is_absolute() else (root / p)

        return cls(
            root=root,
            logs_dir=root / "logs" / "main",
            data_dir=data_dir,
            contacts_json=env_path("CONTACTS_JSON", data_dir / "contacts.json"),
            exports_dir=env_path("CONTACTS_EXPORT_DIR", root / "exports"),
        )

    @classmethod
    def from_args(cls, args) -> "AppConfig":
        cfg = cls.load()
        if getattr(args, "json_path", None):
            p = Path(args.json_path).expanduser()
            cfg.contacts_json = p if p.is_absolute() else Path.cwd() / p
        return cfg

    def pretty_lines(self) -> list[str]:
        return [
            "Resolved configuration:",
            f"root         : {self.root}",
            f"logs_dir     : {self.logs_dir}",
            f"data_dir     : {self.data_dir}",
            f"contacts_json: {self.contacts_json}",
            f"exports_dir  : {self.exports_dir}",
        ]
