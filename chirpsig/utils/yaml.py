"""YAML utilities
"""

import yaml
from chirpsig.utils.stream import StreamConfig


def custom_representer(dumper, value):
    """Custom representer for YAML to handle sequences (lists).

    This function customizes how lists are represented in the YAML output, using
    flow style for sequences (inline lists).

    Args:
        dumper (yaml.Dumper): The YAML dumper responsible for serializing the data.
        value (list): The list to be represented in YAML.

    Returns:
        yaml.Node: The node for the list in flow style.
    """
    return dumper.represent_sequence('tag:yaml.org,2002:seq', value, flow_style=True)

def write_dict_to_yaml(filename: str, info_dict: dict) -> None:
    """Writes a dictionary to a YAML file with customized settings.

    Lists are written in flow style, keys keep their insertion order.

    Args:
        filename (str): The name of the YAML file to which the dictionary will be written.
        info_dict (dict): The dictionary to be written to the YAML file.
    """
    yaml.add_representer(list, custom_representer)

    with open(filename, 'w+') as file:
        yaml.dump(info_dict, file, default_flow_style=False, sort_keys=False, width=200)

def stream_config_from_yaml_dict(yaml_dict: dict) -> StreamConfig:
    """
    passes data from the yaml_dict into the StreamConfig constructor, and returns a new StreamConfig.
    Missing keys keep their defaults.
    """
    if not isinstance(yaml_dict, dict):
        raise ValueError(f"stream config YAML must be a mapping: {type(yaml_dict)}")
    return StreamConfig().update_from(yaml_dict)

def stream_config_to_yaml_dict(stream_config: StreamConfig) -> dict:
    """
    returns a dictionary representation of a StreamConfig object for storing as YAML
    """
    yaml_dict = {}
    yaml_dict["accel"] = stream_config.accel
    yaml_dict["omega_zero"] = stream_config.omega_zero
    yaml_dict["phi"] = stream_config.phi
    yaml_dict["chunk_size"] = stream_config.chunk_size
    yaml_dict["num_chunks"] = stream_config.num_chunks
    yaml_dict["skip_chunks"] = stream_config.skip_chunks
    yaml_dict["stream_format"] = stream_config.stream_format
    yaml_dict["include_x"] = stream_config.include_x
    return yaml_dict

def load_yaml_dict(filepath):
    """
    loads YAML data from specified filepath, an empty document loads as an empty dict
    """
    loaded_dict = {}
    with open(filepath, 'r') as yaml_file:
        loaded_dict = yaml.safe_load(yaml_file)
    if loaded_dict is None:
        loaded_dict = {}
    return loaded_dict

def load_stream_yaml(filepath) -> StreamConfig:
    """
    loads YAML data from specified filepath and uses it to construct and return a new StreamConfig
    """
    return stream_config_from_yaml_dict(load_yaml_dict(filepath))

def save_stream_yaml(filepath, stream_config: StreamConfig) -> None:
    """
    saves YAML data to specified filepath to represent the input StreamConfig
    """
    write_dict_to_yaml(filepath, stream_config_to_yaml_dict(stream_config))
