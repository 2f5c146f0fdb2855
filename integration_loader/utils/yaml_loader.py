from ruamel.yaml import YAML


def get_yaml_instance() -> YAML:
    # manifests are only read, plain python types keep pydantic validation simple
    yaml = YAML(typ="safe", pure=True)
    yaml.allow_duplicate_keys = False
    return yaml
