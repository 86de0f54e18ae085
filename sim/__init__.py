"""
sim — Simulation core
=====================

Modules
-------
direction
    :class:`Direction` compass algebra and axis groupings.
cell
    :class:`Cell` grid stepping and neighbour lists.
tiles
    Four-bit neighbour encoding for road autotiling.
traffic_light
    :class:`TrafficLight` fixed-cycle phase state machine.
collision
    Open-interval bounding-box overlap.
catalog
    Static building catalogue.
board
    :class:`Board` roads, lots and intersections.
simulation
    :class:`Simulation` owner of the board and light groups.
sim_bridge
    :class:`SimBridge` background-thread tick driver.
"""
