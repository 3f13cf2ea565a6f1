"""
Static weekly programs served when the network is unreachable.
"""

from typing import Dict

from coachgen.models.offline import Category

SPRINTS = """WEEKLY TRAINING PROGRAM FOR SPRINTS

MONDAY
Focus: Speed and Power Development
Warm-Up (15 minutes)
• Dynamic stretching
• Light jogging
Sprint Drills (20 minutes)
• High knees
• A-skips and B-skips
Sprint Work (30 minutes)
• 4 x 30m accelerations
• 3 x 100m at 90% effort
Cool-Down (15 minutes)
• Static stretching

TUESDAY
Focus: Strength and Power
Warm-Up (15 minutes)
• Mobility exercises
Strength Training (45 minutes)
• Squats: 4 sets x 6 reps
• Box jumps: 3 sets x 8 reps
Core Work (15 minutes)
• Planks: 3 x 30 seconds

WEDNESDAY
Focus: Recovery and Technique
Technique Work (30 minutes)
• Block starts: 6-8 reps
• Form running

THURSDAY
Focus: Speed Endurance
Speed Endurance (40 minutes)
• 6 x 150m at 85% effort with 3-minute recovery

FRIDAY
Focus: Plyometrics
Plyometric Training (30 minutes)
• Bounding: 3 sets x 20m
• Depth jumps: 3 sets x 6 reps

SATURDAY
Focus: Competition Simulation
Competition Simulation (40 minutes)
• 3 x 100m at race pace with full recovery

SUNDAY
Focus: Active Recovery
Light Activity (30-45 minutes)
• Swimming, cycling, or light jogging

Recovery Focus
• Hydration
• Adequate sleep
"""

MIDDLE_DISTANCE = """WEEKLY TRAINING PROGRAM FOR MIDDLE DISTANCE

MONDAY
Focus: Speed and Anaerobic Capacity
Warm-Up (15 minutes)
• Dynamic stretching
• Light jogging
Speed Work (30 minutes)
• 6 x 200m at 85% effort with 2-minute recovery
• 4 x 400m at 80% effort with 3-minute recovery
Cool-Down (15 minutes)
• Static stretching

TUESDAY
Focus: Strength and Power
Strength Training (45 minutes)
• Squats: 4 sets x 8 reps
• Lunges: 3 sets x 12 reps each leg

WEDNESDAY
Focus: Aerobic Base
Aerobic Run (45-60 minutes)
• Steady-state running at 70-75% effort

THURSDAY
Focus: Threshold Training
Threshold Work (40 minutes)
• 3 x 1000m at threshold pace with 3-minute recovery

FRIDAY
Focus: Recovery and Technique
Technique Work (30 minutes)
• Form running drills
• Cadence work

SATURDAY
Focus: Race Simulation
Race Simulation (40 minutes)
• 2 x 800m at race pace with full recovery

SUNDAY
Focus: Active Recovery
Light Activity (30-45 minutes)
• Swimming, cycling, or light jogging
"""

LONG_DISTANCE = """WEEKLY TRAINING PROGRAM FOR LONG DISTANCE

MONDAY
Focus: Aerobic Base
Warm-Up (15 minutes)
• Dynamic stretching
Aerobic Run (60-75 minutes)
• Steady-state running at 70-75% effort
Cool-Down (15 minutes)
• Static stretching

TUESDAY
Focus: Speed and Anaerobic Capacity
Speed Work (40 minutes)
• 8 x 400m at 85% effort with 2-minute recovery

WEDNESDAY
Focus: Recovery and Technique
Technique Work (30 minutes)
• Stride length exercises

THURSDAY
Focus: Threshold Training
Threshold Work (50 minutes)
• 4 x 1200m at threshold pace with 3-minute recovery

FRIDAY
Focus: Strength and Power
Strength Training (45 minutes)
• Squats: 4 sets x 10 reps
• Calf raises: 3 sets x 15 reps

SATURDAY
Focus: Long Run
Long Run (90-120 minutes)
• Steady-state running at 65-70% effort

SUNDAY
Focus: Active Recovery
Mobility Work (20 minutes)
• Foam rolling
"""

GENERAL = """WEEKLY GENERAL ATHLETICS PROGRAM

MONDAY
Focus: General Conditioning
Warm-Up (15 minutes)
• Light jogging
• Dynamic stretching
Circuit Training (30 minutes)
• Squats: 3 sets x 12 reps
• Push-ups: 3 sets x 10 reps
Cool-Down (10 minutes)
• Static stretching

TUESDAY
Focus: Speed and Coordination
Drills (20 minutes)
• A-skips
• Ladder footwork
Accelerations (20 minutes)
• 6 x 40m at 80% effort

WEDNESDAY
Focus: Aerobic Fitness
Easy Run (30-40 minutes)
• Conversational pace

THURSDAY
Focus: Strength
Strength Training (40 minutes)
• Lunges: 3 sets x 10 reps each leg
• Planks: 3 x 30 seconds

FRIDAY
Focus: Technique
Event Technique (30 minutes)
• Coach-led technical drills

SATURDAY
Focus: Mixed Intensity
Fartlek (25 minutes)
• Alternate 1 minute fast and 2 minutes easy

SUNDAY
Focus: Rest
Recovery Focus
• Hydration
• Adequate sleep
"""

TEMPLATES: Dict[Category, str] = {
    Category.SPRINTS: SPRINTS,
    Category.MIDDLE_DISTANCE: MIDDLE_DISTANCE,
    Category.LONG_DISTANCE: LONG_DISTANCE,
    Category.GENERAL: GENERAL,
}
