"""Resource prefixes, event names and attribute suffixes.

These strings appear verbatim in REST responses and persisted state, so they
are part of the public wire contract. Renaming any of them breaks clients.
"""

# Resource categories
R_SENSORS = "/sensors"
R_LIGHTS = "/lights"
R_GROUPS = "/groups"
R_CONFIG = "/config"

# Events
EVENT_ADDED = "event/added"
EVENT_DELETED = "event/deleted"
EVENT_VALID_GROUP = "event/validgroup"
EVENT_CHECK_GROUP_ANY_ON = "event/checkgroupanyon"

INVALID_SUFFIX = "invalid/suffix"

# Attributes
ATTR_NAME = "attr/name"
ATTR_MANUFACTURER_NAME = "attr/manufacturername"
ATTR_MODEL_ID = "attr/modelid"
ATTR_TYPE = "attr/type"
ATTR_CLASS = "attr/class"
ATTR_UNIQUE_ID = "attr/uniqueid"
ATTR_SW_VERSION = "attr/swversion"

ACTION_SCENE = "action/scene"

# State
STATE_ALARM = "state/alarm"
STATE_ALERT = "state/alert"
STATE_ALL_ON = "state/all_on"
STATE_ANY_ON = "state/any_on"
STATE_BRI = "state/bri"
STATE_BUTTON_EVENT = "state/buttonevent"
STATE_CARBON_MONOXIDE = "state/carbonmonoxide"
STATE_COLOR_MODE = "state/colormode"
STATE_CONSUMPTION = "state/consumption"
STATE_CURRENT = "state/current"
STATE_CT = "state/ct"
STATE_DARK = "state/dark"
STATE_DAYLIGHT = "state/daylight"
STATE_EFFECT = "state/effect"
STATE_FIRE = "state/fire"
STATE_FLAG = "state/flag"
STATE_HUE = "state/hue"
STATE_HUMIDITY = "state/humidity"
STATE_LAST_UPDATED = "state/lastupdated"
STATE_LIGHT_LEVEL = "state/lightlevel"
STATE_LOW_BATTERY = "state/lowbattery"
STATE_LUX = "state/lux"
STATE_ON = "state/on"
STATE_OPEN = "state/open"
STATE_ORIENTATION_X = "state/orientation_x"
STATE_ORIENTATION_Y = "state/orientation_y"
STATE_ORIENTATION_Z = "state/orientation_z"
STATE_PRESENCE = "state/presence"
STATE_PRESSURE = "state/pressure"
STATE_POWER = "state/power"
STATE_REACHABLE = "state/reachable"
STATE_SAT = "state/sat"
STATE_SPEED = "state/speed"
STATE_STATUS = "state/status"
STATE_TAMPERED = "state/tampered"
STATE_TEMPERATURE = "state/temperature"
STATE_TILT_ANGLE = "state/tiltangle"
STATE_VALVE = "state/valve"
STATE_VIBRATION = "state/vibration"
STATE_VIBRATION_STRENGTH = "state/vibrationstrength"
STATE_VOLTAGE = "state/voltage"
STATE_WATER = "state/water"
STATE_X = "state/x"
STATE_Y = "state/y"

# Config
CONFIG_ALERT = "config/alert"
CONFIG_BATTERY = "config/battery"
CONFIG_COLOR_CAPABILITIES = "config/colorcapabilities"
CONFIG_CT_MIN = "config/ctmin"
CONFIG_CT_MAX = "config/ctmax"
CONFIG_CONFIGURED = "config/configured"
CONFIG_DELAY = "config/delay"
CONFIG_DISPLAY_FLIPPED = "config/displayflipped"
CONFIG_DURATION = "config/duration"
CONFIG_GROUP = "config/group"
CONFIG_HEAT_SETPOINT = "config/heatsetpoint"
CONFIG_HOST_FLAGS = "config/hostflags"
CONFIG_ID = "config/id"
CONFIG_LAT = "config/lat"
CONFIG_LED_INDICATION = "config/ledindication"
CONFIG_LOCAL_TIME = "config/localtime"
CONFIG_LOCKED = "config/locked"
CONFIG_LONG = "config/long"
CONFIG_LEVEL_MIN = "config/levelmin"
CONFIG_MODE = "config/mode"
CONFIG_OFFSET = "config/offset"
CONFIG_ON = "config/on"
CONFIG_PENDING = "config/pending"
CONFIG_POWERUP = "config/powerup"
CONFIG_POWER_ON_CT = "config/poweronct"
CONFIG_POWER_ON_LEVEL = "config/poweronlevel"
CONFIG_REACHABLE = "config/reachable"
CONFIG_SCHEDULER = "config/scheduler"
CONFIG_SCHEDULER_ON = "config/scheduleron"
CONFIG_SENSITIVITY = "config/sensitivity"
CONFIG_SENSITIVITY_MAX = "config/sensitivitymax"
CONFIG_SUNRISE_OFFSET = "config/sunriseoffset"
CONFIG_SUNSET_OFFSET = "config/sunsetoffset"
CONFIG_TEMPERATURE = "config/temperature"
CONFIG_THOLD_DARK = "config/tholddark"
CONFIG_THOLD_OFFSET = "config/tholdoffset"
CONFIG_URL = "config/url"
CONFIG_USERTEST = "config/usertest"
CONFIG_WINDOW_COVERING_TYPE = "config/windowcoveringtype"

# Ubisys J1 window covering
CONFIG_UBISYS_J1_MODE = "config/ubisys_j1_mode"
CONFIG_UBISYS_J1_WINDOW_COVERING_TYPE = "config/ubisys_j1_windowcoveringtype"
CONFIG_UBISYS_J1_CONFIGURATION_AND_STATUS = "config/ubisys_j1_configurationandstatus"
CONFIG_UBISYS_J1_INSTALLED_OPEN_LIMIT_LIFT = "config/ubisys_j1_installedopenlimitlift"
CONFIG_UBISYS_J1_INSTALLED_CLOSED_LIMIT_LIFT = "config/ubisys_j1_installedclosedlimitlift"
CONFIG_UBISYS_J1_INSTALLED_OPEN_LIMIT_TILT = "config/ubisys_j1_installedopenlimittilt"
CONFIG_UBISYS_J1_INSTALLED_CLOSED_LIMIT_TILT = "config/ubisys_j1_installedclosedlimittilt"
CONFIG_UBISYS_J1_TURNAROUND_GUARD_TIME = "config/ubisys_j1_turnaroundguardtime"
CONFIG_UBISYS_J1_LIFT_TO_TILT_TRANSITION_STEPS = "config/ubisys_j1_lifttotilttransitionsteps"
CONFIG_UBISYS_J1_TOTAL_STEPS = "config/ubisys_j1_totalsteps"
CONFIG_UBISYS_J1_LIFT_TO_TILT_TRANSITION_STEPS2 = "config/ubisys_j1_lifttotilttransitionsteps2"
CONFIG_UBISYS_J1_TOTAL_STEPS2 = "config/ubisys_j1_totalsteps2"
CONFIG_UBISYS_J1_ADDITIONAL_STEPS = "config/ubisys_j1_additionalsteps"
CONFIG_UBISYS_J1_INACTIVE_POWER_THRESHOLD = "config/ubisys_j1_inactivepowerthreshold"
CONFIG_UBISYS_J1_STARTUP_STEPS = "config/ubisys_j1_startupsteps"

RESOURCE_PREFIXES = (R_SENSORS, R_LIGHTS, R_GROUPS, R_CONFIG)
EVENTS = (EVENT_ADDED, EVENT_DELETED, EVENT_VALID_GROUP, EVENT_CHECK_GROUP_ANY_ON)
