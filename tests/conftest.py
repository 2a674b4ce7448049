"""Global pytest configuration.

Registers the fixture plugin `sample_graphs` that lives next to this file.
Registering it as a plugin rather than importing it here lets pytest apply
assertion rewriting to it.
"""

from __future__ import annotations

pytest_plugins = ["sample_graphs"]
