"""cliwarn test suite.

- test_registry.py: register/read/suppress/dispatch/release behavior
- test_conditions.py: conditional kinds and matching rules
- test_spec.py: raw spec normalization
- test_loader.py: .py/.json/.yaml warning files
- test_colors.py: ANSI decoration and TTY detection
- test_config.py: environment defaults
- test_logging_config.py: library diagnostic logging
- test_exceptions.py: error codes and rendering
"""
