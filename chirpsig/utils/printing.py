""" Contains Helpful methods for properly implementing `__str__` and `__repr__` methods of classes
"""

# Built-In
from typing import Any, List


def generate_repr_str(class_object: Any, exclude_params: List[str] = []) -> str:
    """Generates a string representation of the class object, excluding specified parameters.

    This function creates a human-readable string representation of the given class object,
    including its class name and parameters. Private attributes (leading underscore) and
    any parameters listed in `exclude_params` are left out.

    Args:
        class_object (Any): The class object to generate the string representation for.
        exclude_params (List[str], optional): A list of parameter names to exclude from
                                              the string representation. Defaults to an empty list.

    Returns:
        str: A formatted string representation of the class object with parameters.

    Raises:
        AttributeError: If the class object does not have a `__dict__` attribute.

    Example:
        >>> class Example:
        >>>     def __init__(self, param1, param2):
        >>>         self.param1 = param1
        >>>         self.param2 = param2
        >>> e = Example(1, 2)
        >>> generate_repr_str(e)
        'Example(param1=1,param2=2)'
    """
    class_dict = {k: v for k, v in class_object.__dict__.items() if not k.startswith("_")}

    # remove any exclude params
    for r in exclude_params:
        if r in class_dict:
            class_dict.pop(r)

    params = [f"{k}={v}" for k,v in class_dict.items()]
    params_str = ",".join(params)

    return f"{class_object.__class__.__name__}({params_str})"


### StreamConfig

def stream_config_str(
    stream_config,
    max_width: int = 60,
    first_col_width: int = 20,
) -> str:
    """Custom string representation for a stream configuration.

    Args:
        stream_config (Any): The stream configuration object to generate a string for.
        max_width (int, optional): Width of the separator line. Defaults to 60.
        first_col_width (int, optional): Width of the first column in the output string. Defaults to 20.

    Returns:
        str: A formatted string that represents the configuration in a readable format.

    Example Output:
        ```
        StreamConfig
        ------------------------------------------------------------
        accel                0.00019174759848570515
        omega_zero           0.0
        phi                  0.0
        chunk_size           4096
        num_chunks           1
        skip_chunks          0
        stream_format        t64
        include_x            False
        ```
    """
    fields = [
        'accel',
        'omega_zero',
        'phi',
        'chunk_size',
        'num_chunks',
        'skip_chunks',
        'stream_format',
        'include_x',
    ]
    lines = [f"{name:<{first_col_width}} {getattr(stream_config, name)}" for name in fields]

    return (
        f"\n{stream_config.__class__.__name__}\n"
        f"{'-' * max_width}\n"
        + "\n".join(lines)
        + "\n"
    )
