"""Standard network parameters of the small size league software."""

from __future__ import annotations

# The game controller publishes referee commands by UDP multicast here.
SSL_GAME_CONTROLLER_ADDRESS = "224.5.23.1"
SSL_GAME_CONTROLLER_PORT = 10003

# A simulator publishes error messages on this port (localhost); the number
# is stored in 16 bits, which wraps it.
SSL_SIMULATED_ERROR_PORT = 103462 & 0xFFFF

# Vision publishes detections by UDP multicast on this address and port.
SSL_VISION_ADDRESS = "224.5.23.2"
SSL_VISION_ADDRESS_LOCALHOST = "127.0.0.1"
SSL_VISION_PORT = 10006

# A simulator publishes vision data on this port instead of SSL_VISION_PORT.
SSL_SIMULATED_VISION_PORT = 10020

# The game controller listens for autoref messages on this port.
SSL_AUTOREF_TO_GC_PORT = 10007

# The game controller listens for team messages (e.g. bot substitution) here.
SSL_TEAM_TO_GC_PORT = 10008

# A vision tracker may publish tracked data on this address and port.
SSL_VISION_TRACKER_ADDRESS = "224.5.23.2"
SSL_VISION_TRACKER_ADDRESS_LOCALHOST = "127.0.0.1"
SSL_VISION_TRACKER_PORT = 10010

# A simulator listens for simulation control commands on this port.
SSL_SIMULATION_CONTROL_PORT = 10300

# A simulator listens for robot commands of each team on these ports.
SSL_SIMULATION_CONTROL_BLUE_PORT = 10301
SSL_SIMULATION_CONTROL_YELLOW_PORT = 10302

SSL_MIXED_TEAM_PORT = 10012


def simulation_control_port(is_blue: bool) -> int:
    """Port on which the simulator takes robot commands for a team."""
    return SSL_SIMULATION_CONTROL_BLUE_PORT if is_blue else SSL_SIMULATION_CONTROL_YELLOW_PORT