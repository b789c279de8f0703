from cycletime.hardware import ClockConfig

# 19.2 MHz primary clock, secondary counter at 1 MHz
CLOCK_19M2 = ClockConfig(base_clock_rate=19_200_000, cntfreq=1_000_000)
# Primary clock at nanosecond granularity
CLOCK_1G = ClockConfig(base_clock_rate=1_000_000_000, cntfreq=19_200_000)
