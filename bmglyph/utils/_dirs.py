import os
import importlib.resources


def get_resources_dir():
    """Get the path to the directory of builtin resources."""
    ref = importlib.resources.files("bmglyph.data_files") / "__init__.py"
    context = importlib.resources.as_file(ref)
    with context as path:
        pass
    # Return the dir. We assume that the data files are on a normal dir on the fs.
    return str(path.parent)


def get_sample_font_path():
    """Get the path to the sample BMFont description that ships with bmglyph."""
    return os.path.join(get_resources_dir(), "sample.fnt")
