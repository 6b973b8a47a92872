"""flightlogger/constants/flightgear.py"""

class FGProps:
    #------------------------------------------------------------------------------
    # PROPERTIES READ BY THE FLIGHT LOGGER
    #------------------------------------------------------------------------------

    #--------------------------
    # POSITION
    #--------------------------
    class POSITION:
        LATITUDE = "/position/latitude-deg"
        LONGITUDE = "/position/longitude-deg"
        ALTITUDE_FT = "/position/altitude-ft"
        GROUND_ELEV_FT = "/position/ground-elev-ft"

    #--------------------------
    # VELOCITIES
    #--------------------------
    class VELOCITIES:
        VERTICAL_SPEED_FPS = "/velocities/vertical-speed-fps"
        GROUNDSPEED_KT = "/velocities/groundspeed-kt"
        TRUE_AIRSPEED_KT = "/instrumentation/airspeed-indicator/true-speed-kt"

    #--------------------------
    # ACCELERATIONS
    #--------------------------
    class ACCELERATIONS:
        # Negative while sitting on the ground (about -32.2 ft/s^2)
        PILOT_Z_FPS2 = "/accelerations/pilot/z-accel-fps_sec"

    #--------------------------
    # GEAR
    #--------------------------
    class GEAR:
        # Weight on wheels, 1 when the nose/main gear touches the ground
        WOW = "/gear/gear[{index}]/wow"
        INDICES = (0, 1, 2)
