"""Well-known J1939 address assignments.

The table maps a source or destination address byte to the network component
conventionally found at that address. It is static data: queried, never
mutated. An unassigned byte is a normal outcome and resolves to ``None``.
"""
from __future__ import annotations

from bisect import bisect_left
from enum import IntEnum
from typing import Optional

from ..errors import ValueOutOfRange, require_int

__all__ = ["ADDRESS_TABLE", "Addr", "Address", "address_names", "lookup"]


class Addr(IntEnum):
    """Named network components keyed by their address byte."""

    PRIMARY_ENGINE_CONTROLLER = 0
    SECONDARY_ENGINE_CONTROLLER = 1
    PRIMARY_TRANSMISSION_CONTROLLER = 3
    TRANSMISSION_SHIFT_SELECTOR = 5
    BRAKES = 11
    RETARDER = 15
    CRUISE_CONTROL = 17
    FUEL_SYSTEM = 18
    STEERING_CONTROLLER = 19
    INSTRUMENT_CLUSTER = 23
    CLIMATE_CONTROL_1 = 25
    COMPASS = 28
    BODY_CONTROLLER = 33
    OFF_VEHICLE_GATEWAY = 37
    DID_VID = 40
    RETARDER_EXHAUST_ENGINE_1 = 41
    HEADWAY_CONTROLLER = 42
    SUSPENSION = 47
    CAB_CONTROLLER = 49
    TIRE_PRESSURE_CONTROLLER = 51
    LIGHTING_CONTROL_MODULE = 55
    CLIMATE_CONTROL_2 = 58
    EXHAUST_EMISSION_CONTROLLER = 61
    AUXILIARY_HEATER = 69
    CHASSIS_CONTROLLER = 71
    COMMUNICATIONS_UNIT = 74
    RADIO = 76
    SAFETY_RESTRAINT_SYSTEM = 83
    AFTERTREATMENT_CONTROL_MODULE = 85
    MULTI_PURPOSE_CAMERA = 127
    SWITCH_EXPANSION_MODULE = 128
    AUXILIARY_GAUGE_SWITCH_PACK = 132
    ITERIS = 139
    QUALCOMM_PEOPLENET_TRANSLATOR_BOX = 142
    STAND_ALONE_REAL_TIME_CLOCK = 150
    CENTER_PANEL_1 = 151
    CENTER_PANEL_2 = 152
    CENTER_PANEL_3 = 153
    CENTER_PANEL_4 = 154
    CENTER_PANEL_5 = 155
    WABCO_ONGUARD_RADAR = 160
    SECONDARY_INSTRUMENT_CLUSTER = 167
    OFFBOARD_DIAGNOSTICS = 172
    TRAILER_3_BRIDGE = 184
    TRAILER_2_BRIDGE = 192
    TRAILER_1_BRIDGE = 200
    SAFETY_DIRECT_PROCESSOR = 209
    FORWARD_ROAD_IMAGE_PROCESSOR = 232
    LEFT_REAR_DOOR_POD = 233
    RIGHT_REAR_DOOR_POD = 234
    DOOR_CONTROLLER_1 = 236
    DOOR_CONTROLLER_2 = 237
    TACHOGRAPH = 238
    HYBRID_SYSTEM = 239
    AUXILIARY_POWER_UNIT = 247
    SERVICE_TOOL = 249
    SOURCE_ADDRESS_REQUEST_0 = 254
    SOURCE_ADDRESS_REQUEST_1 = 255

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES = {
    Addr.PRIMARY_ENGINE_CONTROLLER: "Primary Engine Controller | (CPC, ECM)",
    Addr.SECONDARY_ENGINE_CONTROLLER: "Secondary Engine Controller | (MCM, ECM #2)",
    Addr.PRIMARY_TRANSMISSION_CONTROLLER: "Primary Transmission Controller | (TCM)",
    Addr.TRANSMISSION_SHIFT_SELECTOR: "Transmission Shift Selector | (TSS)",
    Addr.BRAKES: "Brakes | System Controller (ABS)",
    Addr.RETARDER: "Retarder",
    Addr.CRUISE_CONTROL: "Cruise Control | (IPM, PCC)",
    Addr.FUEL_SYSTEM: "Fuel System | Controller (CNG)",
    Addr.STEERING_CONTROLLER: "Steering Controller | (SAS)",
    Addr.INSTRUMENT_CLUSTER: "Instrument Gauge Cluster (EGC) | (ICU, RX)",
    Addr.CLIMATE_CONTROL_1: "Climate Control #1 | (FCU)",
    Addr.COMPASS: "Compass",
    Addr.BODY_CONTROLLER: "Body Controller | (SSAM, SAM-CAB, BHM)",
    Addr.OFF_VEHICLE_GATEWAY: "Off-Vehicle Gateway | (CGW)",
    Addr.DID_VID: "Vehicle Information Display | Driver Information Display",
    Addr.RETARDER_EXHAUST_ENGINE_1: "Retarder, Exhaust, Engine #1",
    Addr.HEADWAY_CONTROLLER: "Headway Controller | (RDF) | (OnGuard)",
    Addr.SUSPENSION: "Suspension | System Controller (ECAS)",
    Addr.CAB_CONTROLLER: "Cab Controller | Primary (MSF, SHM, ECC)",
    Addr.TIRE_PRESSURE_CONTROLLER: "Tire Pressure Controller | (TPMS)",
    Addr.LIGHTING_CONTROL_MODULE: "Lighting Control Module | (LCM)",
    Addr.CLIMATE_CONTROL_2: "Climate Control #2 | Rear HVAC | (ParkSmart)",
    Addr.EXHAUST_EMISSION_CONTROLLER: "Exhaust Emission Controller | (ACM) | (DCU)",
    Addr.AUXILIARY_HEATER: "Auxiliary Heater | (ACU)",
    Addr.CHASSIS_CONTROLLER: "Chassis Controller | (CHM, SAM-Chassis)",
    Addr.COMMUNICATIONS_UNIT: "Communications Unit | Cellular (CTP, VT)",
    Addr.RADIO: "Radio",
    Addr.SAFETY_RESTRAINT_SYSTEM: "Safety Restraint System | Air Bag | (SRS)",
    Addr.AFTERTREATMENT_CONTROL_MODULE: "Aftertreatment Control Module | (ACM)",
    Addr.MULTI_PURPOSE_CAMERA: "Multi-Purpose Camera | (MPC)",
    Addr.SWITCH_EXPANSION_MODULE: "Switch Expansion Module | (SEM #1)",
    Addr.AUXILIARY_GAUGE_SWITCH_PACK: "Auxiliary Gauge Switch Pack | (AGSP3)",
    Addr.ITERIS: "Iteris",
    Addr.QUALCOMM_PEOPLENET_TRANSLATOR_BOX: "Qualcomm - PeopleNet Translator Box",
    Addr.STAND_ALONE_REAL_TIME_CLOCK: "Stand-Alone Real Time Clock | (SART)",
    Addr.CENTER_PANEL_1: "Center Panel MUX Switch Pack #1",
    Addr.CENTER_PANEL_2: "Center Panel MUX Switch Pack #2",
    Addr.CENTER_PANEL_3: "Center Panel MUX Switch Pack #3",
    Addr.CENTER_PANEL_4: "Center Panel MUX Switch Pack #4",
    Addr.CENTER_PANEL_5: "Center Panel MUX Switch Pack #5",
    Addr.WABCO_ONGUARD_RADAR: "Wabco OnGuard Radar | OnGuard Display | Collision Mitigation System",
    Addr.SECONDARY_INSTRUMENT_CLUSTER: "Secondary Instrument Cluster | (SIC)",
    Addr.OFFBOARD_DIAGNOSTICS: "Offboard Diagnostics",
    Addr.TRAILER_3_BRIDGE: "Trailer #3 Bridge",
    Addr.TRAILER_2_BRIDGE: "Trailer #2 Bridge",
    Addr.TRAILER_1_BRIDGE: "Trailer #1 Bridge",
    Addr.SAFETY_DIRECT_PROCESSOR: "Bendix Camera | Safety Direct Processor (SDP) Module",
    Addr.FORWARD_ROAD_IMAGE_PROCESSOR: (
        "Forward Road Image Processor | PAM Module | Lane Departure Warning (LDW) Module | (VRDU)"
    ),
    Addr.LEFT_REAR_DOOR_POD: "Left Rear Door Pod",
    Addr.RIGHT_REAR_DOOR_POD: "Right Rear Door Pod",
    Addr.DOOR_CONTROLLER_1: "Door Controller #1",
    Addr.DOOR_CONTROLLER_2: "Door Controller #2",
    Addr.TACHOGRAPH: "Tachograph | (TCO)",
    Addr.HYBRID_SYSTEM: "Hybrid System",
    Addr.AUXILIARY_POWER_UNIT: "Auxiliary Power Unit | (APU)",
    Addr.SERVICE_TOOL: "Service Tool",
    Addr.SOURCE_ADDRESS_REQUEST_0: "Source Address Request 0",
    Addr.SOURCE_ADDRESS_REQUEST_1: "Source Address Request 1",
}

# Sorted by code; searched with bisect.
ADDRESS_TABLE: tuple[tuple[int, Addr], ...] = tuple(sorted((int(a), a) for a in Addr))
_CODES = tuple(code for code, _ in ADDRESS_TABLE)


def lookup(byte: int) -> Optional[Addr]:
    """Return the component assigned to ``byte`` or ``None`` when unassigned."""

    if not 0 <= byte <= 0xFF:
        raise ValueOutOfRange(byte, 0xFF, "Address")
    index = bisect_left(_CODES, byte)
    if index < len(_CODES) and _CODES[index] == byte:
        return ADDRESS_TABLE[index][1]
    return None


def address_names() -> dict[int, str]:
    """Return ``{code: display name}`` for every assigned address."""

    return {code: addr.display_name for code, addr in ADDRESS_TABLE}


class Address(int):
    """An 8-bit source or destination address value."""

    def __new__(cls, value: int) -> "Address":
        require_int(value, "Address")
        if not 0 <= value <= 0xFF:
            raise ValueOutOfRange(value, 0xFF, "Address")
        return super().__new__(cls, value)

    def lookup(self) -> Optional[Addr]:
        """Resolve this address through the well-known address table."""

        return lookup(self)

    def __repr__(self) -> str:
        return f"Address({int(self)})"
