from prstat.infra.repositories.yaml_file import load_repositories

__all__ = ["load_repositories"]
