#!/usr/bin/env python3

import aws_cdk as cdk

from hangar_booking_stack import HangarBookingStack

app = cdk.App()
HangarBookingStack(
    app,
    "HangarBookingStack",
)

app.synth()
