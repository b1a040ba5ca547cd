"""
The six SOLID demos. Each module exposes TITLE and run(stream=None).
"""
from solidshapes.demos.registry import DemoKey, get_demo, list_keys, run_all, run_demo
