"""Build order for a set of packages.

This example orders packages so that each one is built after the packages it
depends on, then shows how a cyclic dependency is reported.
"""

from dataclasses import dataclass, field

from rich.console import Console

import depord


@dataclass(eq=False)
class Package:
    name: str
    requires: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return self.name


packages = {
    p.name: p
    for p in [
        Package("app", ["http", "Log"]),
        Package("http", ["log", "tls"]),
        Package("tls"),
        Package("log"),
    ]
}


def requires(package: Package) -> list[Package]:
    # Package names are case-insensitive
    return [packages[name.lower()] for name in package.requires]


console = Console()

# Key by name so the same package reached twice is built once
sorter = depord.TopologicalSorter(
    requires,
    key_of=lambda p: p.name,
    key_equality=depord.CaseInsensitiveEquality(),
)
for step, package in enumerate(sorter.order(packages.values()), start=1):
    console.print(f"{step}. {package}")

# Introduce a cycle: tls now needs app
packages["tls"].requires.append("app")
try:
    list(sorter.order(packages.values()))
except depord.CycleError as e:
    depord.render_cycle(e, console)
