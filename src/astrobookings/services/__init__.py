"""
Domain services for rockets, launches and customers.

- RocketCatalog: rocket records keyed by generated id
- CustomerDirectory: customer records keyed by email
- LaunchSchedule: launch records validated against the rocket catalog
"""

from astrobookings.services.customer_directory import CustomerDirectory
from astrobookings.services.launch_schedule import LaunchSchedule
from astrobookings.services.rocket_catalog import RocketCatalog

__all__ = ["CustomerDirectory", "LaunchSchedule", "RocketCatalog"]
