"""
Registry of computer die-selection strategies.
Decorate an Agent subclass with @register_agent("name") to make it selectable from the engine, the CLI
(--agent=name) and scripts/run_matchups.py. Every module in this package is imported at the bottom of this
file so its decorators run.
"""

AGENT_MAP = {}


def register_agent(name):
	"""
	Decorator registering an agent class under `name`.
	Usage:
		@register_agent("counter")
		class CounterAgent(Agent): ...
	"""
	def decorator(cls):
		if name in AGENT_MAP and AGENT_MAP[name] is not cls:
			raise ValueError(f"Agent name already registered: {name}")
		AGENT_MAP[name] = cls
		return cls
	return decorator


def create_agent(name):
	"""
	Instantiate a registered agent by (case-insensitive) name.
	Raises:
		ValueError: If no agent is registered under this name.
	"""
	key = name.strip().lower()
	if key not in AGENT_MAP:
		raise ValueError(f"Unknown agent: {name}. Supported: {sorted(AGENT_MAP)}")
	return AGENT_MAP[key]()


import importlib
import pkgutil

for _info in pkgutil.iter_modules(__path__):
	if not _info.ispkg and _info.name != "base":
		importlib.import_module(f"{__name__}.{_info.name}")
