# barblocks

Building blocks for a status bar on Linux. Each module collects or interprets
one kind of system information and turns it into placeholder values, text and
a widget state (`barblocks.prelude.State`: `IDLE`, `INFO`, `GOOD`, `WARNING`,
`CRITICAL`). Click handling is expressed with `barblocks.prelude.MouseButton`.

## Modules

| Module | What it provides |
|--------|------------------|
| `barblocks.memory` | `parse_meminfo`, `parse_arcstats`, `read_memstate`; `MemState.values()` gives byte amounts and percentages, `MemState.state()` applies the thresholds of a `MemoryConfig` for a `MemType` view (memory or swap). ZFS ARC cache, when present, counts as cached memory. |
| `barblocks.uptime` | `read_uptime`, `parse_uptime` and `format_uptime`, which shows the two largest units (`3w 2d`, `1d 2h`, `5h 12m`, `4m 10s`). |
| `barblocks.rofication` | `rofication_status` asks a rofication daemon over its Unix socket for (regular, critical) counts; `parse_response`, `notification_state`, `RoficationConfig`. |
| `barblocks.speedtest` | `run_speedtest` runs `speedtest-cli --json`; `parse_speedtest_output` and `SpeedtestResult.values()` (ping in seconds, speeds in bits per second). |
| `barblocks.mpris` | `PlaybackStatus` and `PlayerMetadata` (title, first artist, url from a metadata mapping). |
| `barblocks.music` | `extract_player_name`, `player_matches`, `Player` (placeholders including `combo`) and `PlayerList` (add, remove by bus owner, cycle, current). |
| `barblocks.net` | `NetStats` byte counters, `compute_speeds` and `push_to_hist` for speed history. |
| `barblocks.nvidia_gpu` | `GpuInfo.parse` for one CSV line of `nvidia-smi`, `temperature_state`, `nvidia_smi_args`, `fan_speed_args` and `set_fan_speed` (runs `nvidia-settings`). |
| `barblocks.menu` | `Menu`, advanced by `handle_click`, and `MenuItem`, whose `spawn()` starts its command with `sh -c`. Items may ask for a double-click confirmation. |
| `barblocks.pacman` | `choose_watched`, `get_update_count`, `has_matching_update`, `update_state`, `get_updates_db_dir`, and the command runners `get_pacman_available_updates` (needs `fakeroot` and `pacman`) and `get_aur_available_updates`. |
| `barblocks.pomodoro` | `PomodoroConfig`, `task_text`, `break_text`, `minutes_left` and `adjust_number` for scroll input. |
| `barblocks.sound` | `DeviceKind`, `SoundDriver`, `volume_icon`, `clamp_step`, `map_output_name`. |
| `barblocks.alsa` | `AlsaDevice` driven by `amixer` (get info, set volume, toggle mute) and `alsactl monitor`; `parse_amixer_output`, `capped_volume`. |
| `barblocks.temperature` | `TemperatureScale`, `Thresholds.for_scale`, `collect_readings`, `summarize` and `temperature_state`. |
| `barblocks.taskwarrior` | `TaskwarriorConfig`, `TaskFilter`, `get_number_of_tasks` (runs `task`), `parse_task_count`, `task_state`, `task_values`. |
| `barblocks.toggle` | `ToggleConfig`, `shell`, `is_toggled`, `query_state` and `run_toggle_command`. |
| `barblocks.clock` | `get_time(format, timezone)` with strftime specifiers plus `%R`, `%T`, `%F`, `%D`; the timezone is an IANA name or a `tzinfo`. |

## Example

```python
from barblocks.memory import MemType, MemoryConfig, read_memstate
from barblocks.uptime import format_uptime

config = MemoryConfig.from_dict({"warning_mem": 70, "critical_mem": 90})
state = read_memstate()
print(state.values()["mem_used_percents"], state.state(MemType.MEMORY, config))

print(format_uptime(93784))   # "1d 2h"
```

```python
import re
from barblocks.music import extract_player_name, player_matches

extract_player_name("org.mpris.MediaPlayer2.spotify")  # "spotify"
player_matches("org.mpris.MediaPlayer2.mpd", None, [re.compile("mpd")])  # False
```

Some functions run external programs (`amixer`, `alsactl`, `nvidia-smi`,
`nvidia-settings`, `pacman`, `fakeroot`, `task`, `speedtest-cli`, `sh` or your
`$SHELL`). Those programs must be installed for the functions that use them.

## What the package does not do

- It is a library, not a status bar program: there is no command to run, no
  update loop and no output in any bar protocol.
- Format strings such as `"$mem_free.eng(3,B,M)"` are kept as configuration
  values only; the package does not render them.
- It does not talk to D-Bus. MPRIS players, their metadata and bus-owner
  changes must be supplied by the caller.
- It does not read interface statistics or Wi-Fi details itself; `NetStats`
  values come from the caller.
- It does not read hardware sensors; `barblocks.temperature` works on readings
  it is given.
- Only the ALSA sound device is implemented; `SoundDriver.PULSEAUDIO` is a
  setting without a device behind it.

## Tests

```
pip install -e .[test]
pytest
```