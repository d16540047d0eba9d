"""
Analytics Django adapter.
Per-request analytics context over the framework-free bus.
"""
