"""Machines section of the status document."""

from __future__ import annotations

from dataclasses import dataclass, field

from fdb_exporter.models.common import Hz, JsonModel


@dataclass
class MachineCpu(JsonModel):
    logical_core_utilization: float = 0.0


@dataclass
class MachineLocality(JsonModel):
    machine_id: str = field(default="", metadata={"json": "machineid"})
    process_id: str = field(default="", metadata={"json": "processid"})
    zone_id: str = field(default="", metadata={"json": "zoneid"})


@dataclass
class MachineMemory(JsonModel):
    committed_bytes: int = 0
    free_bytes: int = 0
    total_bytes: int = 0


@dataclass
class MachineNetwork(JsonModel):
    megabits_received: Hz | None = None
    megabits_sent: Hz | None = None
    tcp_segments_retransmitted: Hz | None = None


@dataclass
class Machine(JsonModel):
    address: str = ""
    contributing_workers: int = 0
    cpu: MachineCpu | None = None
    excluded: bool = False
    locality: MachineLocality | None = None
    memory: MachineMemory | None = None
    network: MachineNetwork | None = None