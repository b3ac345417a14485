# Copyright (c) 2026 orbitglobe contributors. All rights reserved.
# Licensed under the MIT License — see LICENSE.
