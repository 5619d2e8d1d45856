# -*- coding: utf-8 -*-

"""
Filename: ocean_app.py
Author: storro
Date: 2026-10-18
Description: Preview application, steps the ocean simulation every frame and shows its fields
"""

import logging

from direct.showbase.ShowBase import ShowBase
from direct.task.Task import Task
from panda3d.core import ClockObject, load_prc_file_data

from oceanfft.app.debug_cards import DebugCardController
from oceanfft.ocean.ocean_config import OceanConfig
from oceanfft.ocean.ocean_simulation import OceanSimulation


class OceanApp(ShowBase):
    def __init__(self, config: OceanConfig, time_scale: float = 1.0) -> None:
        self.configure_panda()
        super().__init__()

        self.set_frame_rate_meter(True)
        self.disable_mouse()

        self._time_scale = float(time_scale)

        # Initial spectrum, conjugate packing and butterfly table (built once)
        self.ocean = OceanSimulation(config)
        self.ocean.step(0.0)
        logging.info("Ocean simulation initialized")

        self._debug_cards = DebugCardController(self, self.ocean.textures)

        self.task_mgr.add(self._ocean_step_task, "ocean_step")
        self.accept("escape", self.userExit)

    def _ocean_step_task(self, task: Task) -> int:
        dt = ClockObject.get_global_clock().get_dt()
        self.ocean.step(dt * self._time_scale)
        return task.cont

    def configure_panda(self) -> None:
        prc_data = """
            window-title Tessendorf Ocean
            win-size 1280 720
            fullscreen false
            sync-video true
        """
        load_prc_file_data("", prc_data)

    def destroy(self) -> None:
        self.ocean.release()
        super().destroy()
