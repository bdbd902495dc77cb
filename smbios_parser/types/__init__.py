'''Decoders for each SMBIOS structure type.

STRUCTURES maps a type code to the class that decodes it. Types without an
entry decode to Unknown, which preserves the raw bytes and strings.
'''

from ..structs.smbios_structs import *
from .common import EndOfTable, Inactive, Unknown
from .devices import (
    OnboardDevices, OnboardDevicesExtended, PointingDevice, PortConnector,
    PortableBattery, SystemSlot, TPMDevice)
from .management import (
    AdditionalInformation, CoolingDevice, CurrentProbe, IPMIDevice,
    ManagementControllerHostInterface, ManagementDevice,
    ManagementDeviceComponent, ManagementDeviceThreshold,
    OutOfBandRemoteAccess, SystemPowerSupply, TemperatureProbe, VoltageProbe)
from .memory import (
    MemoryArrayMappedAddress, MemoryChannel, MemoryDevice,
    MemoryDeviceMappedAddress, MemoryError32, MemoryError64,
    PhysicalMemoryArray)
from .processor import CacheInformation, ProcessorInformation
from .system import (
    BaseboardInformation, BIOSInformation, BIOSLanguage, ChassisInformation,
    GroupAssociations, HardwareSecurity, OEMStrings,
    SystemBoot, SystemConfigurationOptions, SystemEventLog, SystemInformation,
    SystemPowerControls, SystemReset)


STRUCTURES = {
    TYPE_BIOS: BIOSInformation,
    TYPE_SYSTEM: SystemInformation,
    TYPE_BASEBOARD: BaseboardInformation,
    TYPE_CHASSIS: ChassisInformation,
    TYPE_PROCESSOR: ProcessorInformation,
    TYPE_CACHE: CacheInformation,
    TYPE_PORT_CONNECTOR: PortConnector,
    TYPE_SYSTEM_SLOT: SystemSlot,
    TYPE_ONBOARD_DEVICES: OnboardDevices,
    TYPE_OEM_STRINGS: OEMStrings,
    TYPE_SYSTEM_CONFIGURATION: SystemConfigurationOptions,
    TYPE_BIOS_LANGUAGE: BIOSLanguage,
    TYPE_GROUP_ASSOCIATIONS: GroupAssociations,
    TYPE_SYSTEM_EVENT_LOG: SystemEventLog,
    TYPE_PHYSICAL_MEMORY_ARRAY: PhysicalMemoryArray,
    TYPE_MEMORY_DEVICE: MemoryDevice,
    TYPE_MEMORY_ERROR_32: MemoryError32,
    TYPE_MEMORY_ARRAY_MAPPED_ADDRESS: MemoryArrayMappedAddress,
    TYPE_MEMORY_DEVICE_MAPPED_ADDRESS: MemoryDeviceMappedAddress,
    TYPE_POINTING_DEVICE: PointingDevice,
    TYPE_PORTABLE_BATTERY: PortableBattery,
    TYPE_SYSTEM_RESET: SystemReset,
    TYPE_HARDWARE_SECURITY: HardwareSecurity,
    TYPE_SYSTEM_POWER_CONTROLS: SystemPowerControls,
    TYPE_VOLTAGE_PROBE: VoltageProbe,
    TYPE_COOLING_DEVICE: CoolingDevice,
    TYPE_TEMPERATURE_PROBE: TemperatureProbe,
    TYPE_CURRENT_PROBE: CurrentProbe,
    TYPE_OUT_OF_BAND_REMOTE_ACCESS: OutOfBandRemoteAccess,
    TYPE_SYSTEM_BOOT: SystemBoot,
    TYPE_MEMORY_ERROR_64: MemoryError64,
    TYPE_MANAGEMENT_DEVICE: ManagementDevice,
    TYPE_MANAGEMENT_DEVICE_COMPONENT: ManagementDeviceComponent,
    TYPE_MANAGEMENT_DEVICE_THRESHOLD: ManagementDeviceThreshold,
    TYPE_MEMORY_CHANNEL: MemoryChannel,
    TYPE_IPMI_DEVICE: IPMIDevice,
    TYPE_POWER_SUPPLY: SystemPowerSupply,
    TYPE_ADDITIONAL_INFORMATION: AdditionalInformation,
    TYPE_ONBOARD_DEVICES_EXTENDED: OnboardDevicesExtended,
    TYPE_MANAGEMENT_CONTROLLER_HOST_INTERFACE:
        ManagementControllerHostInterface,
    TYPE_TPM_DEVICE: TPMDevice,
    TYPE_INACTIVE: Inactive,
    TYPE_END_OF_TABLE: EndOfTable,
}


def decode_record(record):
    '''Decode one StructureRecord into its structure class.

    Raise:
        DecodeError: the record is malformed for its type.
    '''
    structure = STRUCTURES.get(record.type, Unknown)(record)
    structure.process()
    return structure
