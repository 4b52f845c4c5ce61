from .demo import INT_MAX, INT_MIN, Demo, DemoOut
