"""
Static exercise catalog and muscle-group reference data.

The catalog is written into the exercises table the first time the store is
opened against an empty database. Entries are never edited afterwards.
"""

from dataclasses import dataclass

from gymtrack.models import Category, Exercise, MuscleGroup


@dataclass(frozen=True)
class MuscleGroupInfo:
    id: MuscleGroup
    display_name: str
    region: str  # shoulders | chest | back | arms | legs | core


MUSCLE_GROUPS: dict[MuscleGroup, MuscleGroupInfo] = {
    info.id: info
    for info in (
        MuscleGroupInfo(MuscleGroup.FRONT_DELTS, "Front Delts", "shoulders"),
        MuscleGroupInfo(MuscleGroup.SIDE_DELTS, "Side Delts", "shoulders"),
        MuscleGroupInfo(MuscleGroup.REAR_DELTS, "Rear Delts", "shoulders"),
        MuscleGroupInfo(MuscleGroup.UPPER_CHEST, "Upper Chest", "chest"),
        MuscleGroupInfo(MuscleGroup.MID_CHEST, "Mid Chest", "chest"),
        MuscleGroupInfo(MuscleGroup.LOWER_CHEST, "Lower Chest", "chest"),
        MuscleGroupInfo(MuscleGroup.LATS, "Lats", "back"),
        MuscleGroupInfo(MuscleGroup.UPPER_BACK, "Upper Back", "back"),
        MuscleGroupInfo(MuscleGroup.MID_BACK, "Mid Back", "back"),
        MuscleGroupInfo(MuscleGroup.LOWER_BACK, "Lower Back", "back"),
        MuscleGroupInfo(MuscleGroup.BICEPS, "Biceps", "arms"),
        MuscleGroupInfo(MuscleGroup.TRICEPS, "Triceps", "arms"),
        MuscleGroupInfo(MuscleGroup.FOREARMS, "Forearms", "arms"),
        MuscleGroupInfo(MuscleGroup.QUADS, "Quads", "legs"),
        MuscleGroupInfo(MuscleGroup.HAMSTRINGS, "Hamstrings", "legs"),
        MuscleGroupInfo(MuscleGroup.GLUTES, "Glutes", "legs"),
        MuscleGroupInfo(MuscleGroup.CALVES, "Calves", "legs"),
        MuscleGroupInfo(MuscleGroup.ABS, "Abs", "core"),
        MuscleGroupInfo(MuscleGroup.OBLIQUES, "Obliques", "core"),
    )
}

# ---------------------------------------------------------------------------
# Exercise catalogue: (id, name, primary muscle group, equipment, rep range)
# ---------------------------------------------------------------------------

CATALOG: list[tuple[str, str, MuscleGroup, Category, str | None]] = [
    # Chest exercises
    ("ex001", "Barbell Bench Press", MuscleGroup.MID_CHEST, Category.BARBELL, "5-8"),
    ("ex002", "Incline Barbell Bench Press", MuscleGroup.UPPER_CHEST, Category.BARBELL, "6-10"),
    ("ex003", "Decline Barbell Bench Press", MuscleGroup.LOWER_CHEST, Category.BARBELL, "6-10"),
    ("ex004", "Dumbbell Bench Press", MuscleGroup.MID_CHEST, Category.DUMBBELL, "8-12"),
    ("ex005", "Incline Dumbbell Press", MuscleGroup.UPPER_CHEST, Category.DUMBBELL, "8-12"),
    ("ex006", "Decline Dumbbell Press", MuscleGroup.LOWER_CHEST, Category.DUMBBELL, "8-12"),
    ("ex007", "Dumbbell Flyes", MuscleGroup.MID_CHEST, Category.DUMBBELL, "10-15"),
    ("ex008", "Incline Dumbbell Flyes", MuscleGroup.UPPER_CHEST, Category.DUMBBELL, "10-15"),
    ("ex009", "Cable Flyes", MuscleGroup.MID_CHEST, Category.CABLE, "12-15"),
    ("ex010", "Low to High Cable Flyes", MuscleGroup.UPPER_CHEST, Category.CABLE, "12-15"),
    ("ex011", "High to Low Cable Flyes", MuscleGroup.LOWER_CHEST, Category.CABLE, "12-15"),
    ("ex012", "Chest Press Machine", MuscleGroup.MID_CHEST, Category.MACHINE, "8-12"),
    ("ex013", "Pec Deck Machine", MuscleGroup.MID_CHEST, Category.MACHINE, "12-15"),
    ("ex014", "Push-ups", MuscleGroup.MID_CHEST, Category.BODYWEIGHT, "10-20"),
    ("ex015", "Dips (Chest Variation)", MuscleGroup.LOWER_CHEST, Category.BODYWEIGHT, "8-12"),
    ("ex016", "Landmine Press", MuscleGroup.UPPER_CHEST, Category.BARBELL, "8-12"),

    # Back exercises
    ("ex017", "Deadlift", MuscleGroup.LOWER_BACK, Category.BARBELL, "3-6"),
    ("ex018", "Romanian Deadlift", MuscleGroup.LOWER_BACK, Category.BARBELL, "6-10"),
    ("ex019", "Barbell Row", MuscleGroup.MID_BACK, Category.BARBELL, "6-10"),
    ("ex020", "Pendlay Row", MuscleGroup.MID_BACK, Category.BARBELL, "5-8"),
    ("ex021", "T-Bar Row", MuscleGroup.MID_BACK, Category.BARBELL, "8-12"),
    ("ex022", "Pull-ups", MuscleGroup.LATS, Category.BODYWEIGHT, "5-10"),
    ("ex023", "Chin-ups", MuscleGroup.LATS, Category.BODYWEIGHT, "5-10"),
    ("ex024", "Wide Grip Pull-ups", MuscleGroup.LATS, Category.BODYWEIGHT, "5-10"),
    ("ex025", "Lat Pulldown", MuscleGroup.LATS, Category.MACHINE, "8-12"),
    ("ex026", "Wide Grip Lat Pulldown", MuscleGroup.LATS, Category.MACHINE, "8-12"),
    ("ex027", "Close Grip Lat Pulldown", MuscleGroup.LATS, Category.MACHINE, "8-12"),
    ("ex028", "Seated Cable Row", MuscleGroup.MID_BACK, Category.CABLE, "8-12"),
    ("ex029", "Single Arm Dumbbell Row", MuscleGroup.LATS, Category.DUMBBELL, "8-12"),
    ("ex030", "Dumbbell Row (Both Arms)", MuscleGroup.MID_BACK, Category.DUMBBELL, "8-12"),
    ("ex031", "Chest Supported Row", MuscleGroup.MID_BACK, Category.DUMBBELL, "10-12"),
    ("ex032", "Face Pulls", MuscleGroup.UPPER_BACK, Category.CABLE, "15-20"),
    ("ex033", "Straight Arm Pulldown", MuscleGroup.LATS, Category.CABLE, "12-15"),
    ("ex034", "Machine Row", MuscleGroup.MID_BACK, Category.MACHINE, "8-12"),
    ("ex035", "Inverted Row", MuscleGroup.MID_BACK, Category.BODYWEIGHT, "8-15"),
    ("ex036", "Rack Pulls", MuscleGroup.UPPER_BACK, Category.BARBELL, "5-8"),
    ("ex037", "Good Mornings", MuscleGroup.LOWER_BACK, Category.BARBELL, "8-12"),
    ("ex038", "Hyperextensions", MuscleGroup.LOWER_BACK, Category.BODYWEIGHT, "12-15"),

    # Shoulder exercises
    ("ex039", "Overhead Press", MuscleGroup.FRONT_DELTS, Category.BARBELL, "5-8"),
    ("ex040", "Seated Overhead Press", MuscleGroup.FRONT_DELTS, Category.BARBELL, "6-10"),
    ("ex041", "Push Press", MuscleGroup.FRONT_DELTS, Category.BARBELL, "5-8"),
    ("ex042", "Dumbbell Shoulder Press", MuscleGroup.FRONT_DELTS, Category.DUMBBELL, "8-12"),
    ("ex043", "Seated Dumbbell Press", MuscleGroup.FRONT_DELTS, Category.DUMBBELL, "8-12"),
    ("ex044", "Arnold Press", MuscleGroup.FRONT_DELTS, Category.DUMBBELL, "8-12"),
    ("ex045", "Lateral Raises", MuscleGroup.SIDE_DELTS, Category.DUMBBELL, "12-15"),
    ("ex046", "Cable Lateral Raises", MuscleGroup.SIDE_DELTS, Category.CABLE, "12-15"),
    ("ex047", "Machine Lateral Raises", MuscleGroup.SIDE_DELTS, Category.MACHINE, "12-15"),
    ("ex048", "Front Raises", MuscleGroup.FRONT_DELTS, Category.DUMBBELL, "12-15"),
    ("ex049", "Barbell Front Raises", MuscleGroup.FRONT_DELTS, Category.BARBELL, "12-15"),
    ("ex050", "Reverse Flyes", MuscleGroup.REAR_DELTS, Category.DUMBBELL, "12-15"),
    ("ex051", "Cable Reverse Flyes", MuscleGroup.REAR_DELTS, Category.CABLE, "12-15"),
    ("ex052", "Bent Over Lateral Raises", MuscleGroup.REAR_DELTS, Category.DUMBBELL, "12-15"),
    ("ex053", "Rear Delt Machine", MuscleGroup.REAR_DELTS, Category.MACHINE, "12-15"),
    ("ex054", "Upright Row", MuscleGroup.SIDE_DELTS, Category.BARBELL, "10-12"),
    ("ex055", "Dumbbell Upright Row", MuscleGroup.SIDE_DELTS, Category.DUMBBELL, "10-12"),
    ("ex056", "Shoulder Press Machine", MuscleGroup.FRONT_DELTS, Category.MACHINE, "8-12"),
    ("ex057", "Pike Push-ups", MuscleGroup.FRONT_DELTS, Category.BODYWEIGHT, "8-12"),

    # Arm exercises - biceps
    ("ex058", "Barbell Curl", MuscleGroup.BICEPS, Category.BARBELL, "8-12"),
    ("ex059", "EZ Bar Curl", MuscleGroup.BICEPS, Category.BARBELL, "8-12"),
    ("ex060", "Preacher Curl", MuscleGroup.BICEPS, Category.BARBELL, "10-12"),
    ("ex061", "Dumbbell Curl", MuscleGroup.BICEPS, Category.DUMBBELL, "8-12"),
    ("ex062", "Alternating Dumbbell Curl", MuscleGroup.BICEPS, Category.DUMBBELL, "8-12"),
    ("ex063", "Hammer Curl", MuscleGroup.BICEPS, Category.DUMBBELL, "8-12"),
    ("ex064", "Incline Dumbbell Curl", MuscleGroup.BICEPS, Category.DUMBBELL, "10-12"),
    ("ex065", "Concentration Curl", MuscleGroup.BICEPS, Category.DUMBBELL, "10-12"),
    ("ex066", "Cable Curl", MuscleGroup.BICEPS, Category.CABLE, "10-15"),
    ("ex067", "Cable Hammer Curl", MuscleGroup.BICEPS, Category.CABLE, "10-15"),
    ("ex068", "Machine Curl", MuscleGroup.BICEPS, Category.MACHINE, "10-12"),
    ("ex069", "Spider Curl", MuscleGroup.BICEPS, Category.BARBELL, "10-12"),
    ("ex070", "Drag Curl", MuscleGroup.BICEPS, Category.BARBELL, "8-12"),

    # Arm exercises - triceps
    ("ex071", "Close Grip Bench Press", MuscleGroup.TRICEPS, Category.BARBELL, "6-10"),
    ("ex072", "Tricep Dips", MuscleGroup.TRICEPS, Category.BODYWEIGHT, "8-12"),
    ("ex073", "Tricep Pushdown", MuscleGroup.TRICEPS, Category.CABLE, "10-15"),
    ("ex074", "Rope Tricep Pushdown", MuscleGroup.TRICEPS, Category.CABLE, "10-15"),
    ("ex075", "Overhead Tricep Extension", MuscleGroup.TRICEPS, Category.DUMBBELL, "10-12"),
    ("ex076", "Skull Crushers", MuscleGroup.TRICEPS, Category.BARBELL, "8-12"),
    ("ex077", "Dumbbell Skull Crushers", MuscleGroup.TRICEPS, Category.DUMBBELL, "8-12"),
    ("ex078", "Cable Overhead Extension", MuscleGroup.TRICEPS, Category.CABLE, "12-15"),
    ("ex079", "Tricep Kickbacks", MuscleGroup.TRICEPS, Category.DUMBBELL, "12-15"),
    ("ex080", "Diamond Push-ups", MuscleGroup.TRICEPS, Category.BODYWEIGHT, "10-15"),
    ("ex081", "Bench Dips", MuscleGroup.TRICEPS, Category.BODYWEIGHT, "12-20"),
    ("ex082", "JM Press", MuscleGroup.TRICEPS, Category.BARBELL, "8-12"),

    # Forearms
    ("ex083", "Wrist Curls", MuscleGroup.FOREARMS, Category.BARBELL, "15-20"),
    ("ex084", "Reverse Wrist Curls", MuscleGroup.FOREARMS, Category.BARBELL, "15-20"),
    ("ex085", "Dumbbell Wrist Curls", MuscleGroup.FOREARMS, Category.DUMBBELL, "15-20"),
    ("ex086", "Farmers Walk", MuscleGroup.FOREARMS, Category.DUMBBELL, "30-60s"),
    ("ex087", "Reverse Curls", MuscleGroup.FOREARMS, Category.BARBELL, "10-12"),

    # Leg exercises - quads
    ("ex088", "Barbell Squat", MuscleGroup.QUADS, Category.BARBELL, "5-8"),
    ("ex089", "Front Squat", MuscleGroup.QUADS, Category.BARBELL, "6-10"),
    ("ex090", "Pause Squat", MuscleGroup.QUADS, Category.BARBELL, "5-8"),
    ("ex091", "Box Squat", MuscleGroup.QUADS, Category.BARBELL, "5-8"),
    ("ex092", "Goblet Squat", MuscleGroup.QUADS, Category.DUMBBELL, "10-15"),
    ("ex093", "Leg Press", MuscleGroup.QUADS, Category.MACHINE, "8-15"),
    ("ex094", "Hack Squat", MuscleGroup.QUADS, Category.MACHINE, "8-12"),
    ("ex095", "Leg Extension", MuscleGroup.QUADS, Category.MACHINE, "12-15"),
    ("ex096", "Bulgarian Split Squat", MuscleGroup.QUADS, Category.DUMBBELL, "8-12"),
    ("ex097", "Walking Lunges", MuscleGroup.QUADS, Category.DUMBBELL, "10-15"),
    ("ex098", "Reverse Lunges", MuscleGroup.QUADS, Category.DUMBBELL, "10-15"),
    ("ex099", "Step-ups", MuscleGroup.QUADS, Category.DUMBBELL, "10-12"),
    ("ex100", "Sissy Squats", MuscleGroup.QUADS, Category.BODYWEIGHT, "10-15"),

    # Leg exercises - hamstrings
    ("ex101", "Romanian Deadlift", MuscleGroup.HAMSTRINGS, Category.BARBELL, "8-12"),
    ("ex102", "Stiff Leg Deadlift", MuscleGroup.HAMSTRINGS, Category.BARBELL, "8-12"),
    ("ex103", "Dumbbell RDL", MuscleGroup.HAMSTRINGS, Category.DUMBBELL, "10-12"),
    ("ex104", "Single Leg RDL", MuscleGroup.HAMSTRINGS, Category.DUMBBELL, "10-12"),
    ("ex105", "Leg Curl", MuscleGroup.HAMSTRINGS, Category.MACHINE, "12-15"),
    ("ex106", "Seated Leg Curl", MuscleGroup.HAMSTRINGS, Category.MACHINE, "12-15"),
    ("ex107", "Lying Leg Curl", MuscleGroup.HAMSTRINGS, Category.MACHINE, "12-15"),
    ("ex108", "Nordic Curls", MuscleGroup.HAMSTRINGS, Category.BODYWEIGHT, "5-8"),
    ("ex109", "Good Mornings", MuscleGroup.HAMSTRINGS, Category.BARBELL, "8-12"),
    ("ex110", "Glute Ham Raise", MuscleGroup.HAMSTRINGS, Category.BODYWEIGHT, "8-12"),

    # Leg exercises - glutes
    ("ex111", "Hip Thrust", MuscleGroup.GLUTES, Category.BARBELL, "8-12"),
    ("ex112", "Barbell Glute Bridge", MuscleGroup.GLUTES, Category.BARBELL, "10-15"),
    ("ex113", "Single Leg Hip Thrust", MuscleGroup.GLUTES, Category.BODYWEIGHT, "10-15"),
    ("ex114", "Cable Pull Through", MuscleGroup.GLUTES, Category.CABLE, "12-15"),
    ("ex115", "Kettlebell Swing", MuscleGroup.GLUTES, Category.DUMBBELL, "15-20"),
    ("ex116", "Cable Kickbacks", MuscleGroup.GLUTES, Category.CABLE, "12-15"),
    ("ex117", "Smith Machine Hip Thrust", MuscleGroup.GLUTES, Category.MACHINE, "8-12"),
    ("ex118", "Sumo Deadlift", MuscleGroup.GLUTES, Category.BARBELL, "5-8"),

    # Calves
    ("ex119", "Standing Calf Raise", MuscleGroup.CALVES, Category.MACHINE, "12-20"),
    ("ex120", "Seated Calf Raise", MuscleGroup.CALVES, Category.MACHINE, "15-20"),
    ("ex121", "Dumbbell Calf Raise", MuscleGroup.CALVES, Category.DUMBBELL, "15-20"),
    ("ex122", "Single Leg Calf Raise", MuscleGroup.CALVES, Category.BODYWEIGHT, "15-20"),
    ("ex123", "Leg Press Calf Raise", MuscleGroup.CALVES, Category.MACHINE, "15-20"),

    # Core - abs
    ("ex124", "Plank", MuscleGroup.ABS, Category.BODYWEIGHT, "30-60s"),
    ("ex125", "Crunches", MuscleGroup.ABS, Category.BODYWEIGHT, "15-25"),
    ("ex126", "Hanging Leg Raises", MuscleGroup.ABS, Category.BODYWEIGHT, "10-15"),
    ("ex127", "Hanging Knee Raises", MuscleGroup.ABS, Category.BODYWEIGHT, "10-15"),
    ("ex128", "Cable Crunches", MuscleGroup.ABS, Category.CABLE, "15-20"),
    ("ex129", "Ab Wheel Rollout", MuscleGroup.ABS, Category.BODYWEIGHT, "10-15"),
    ("ex130", "Bicycle Crunches", MuscleGroup.ABS, Category.BODYWEIGHT, "15-20"),
    ("ex131", "Mountain Climbers", MuscleGroup.ABS, Category.BODYWEIGHT, "15-20"),
    ("ex132", "Decline Sit-ups", MuscleGroup.ABS, Category.BODYWEIGHT, "15-20"),
    ("ex133", "V-ups", MuscleGroup.ABS, Category.BODYWEIGHT, "10-15"),
    ("ex134", "Dragon Flags", MuscleGroup.ABS, Category.BODYWEIGHT, "5-10"),
    ("ex135", "L-sit", MuscleGroup.ABS, Category.BODYWEIGHT, "15-30s"),

    # Core - obliques
    ("ex136", "Russian Twists", MuscleGroup.OBLIQUES, Category.BODYWEIGHT, "15-20"),
    ("ex137", "Cable Woodchoppers", MuscleGroup.OBLIQUES, Category.CABLE, "12-15"),
    ("ex138", "Side Plank", MuscleGroup.OBLIQUES, Category.BODYWEIGHT, "30-60s"),
    ("ex139", "Oblique Crunches", MuscleGroup.OBLIQUES, Category.BODYWEIGHT, "15-20"),
    ("ex140", "Dumbbell Side Bend", MuscleGroup.OBLIQUES, Category.DUMBBELL, "12-15"),
    ("ex141", "Pallof Press", MuscleGroup.OBLIQUES, Category.CABLE, "10-12"),
    ("ex142", "Windshield Wipers", MuscleGroup.OBLIQUES, Category.BODYWEIGHT, "10-15"),

    # Additional compound/full body
    ("ex143", "Clean and Press", MuscleGroup.FRONT_DELTS, Category.BARBELL, "5-8"),
    ("ex144", "Power Clean", MuscleGroup.UPPER_BACK, Category.BARBELL, "3-5"),
    ("ex145", "Hang Clean", MuscleGroup.UPPER_BACK, Category.BARBELL, "3-5"),
    ("ex146", "Snatch", MuscleGroup.UPPER_BACK, Category.BARBELL, "2-4"),
    ("ex147", "Hang Snatch", MuscleGroup.UPPER_BACK, Category.BARBELL, "2-4"),
    ("ex148", "Thrusters", MuscleGroup.QUADS, Category.BARBELL, "8-12"),
    ("ex149", "Burpees", MuscleGroup.ABS, Category.BODYWEIGHT, "10-15"),
    ("ex150", "Battle Ropes", MuscleGroup.FRONT_DELTS, Category.BODYWEIGHT, "30-60s"),

    # Additional variations
    ("ex151", "Zercher Squat", MuscleGroup.QUADS, Category.BARBELL, "6-10"),
    ("ex152", "Anderson Squat", MuscleGroup.QUADS, Category.BARBELL, "5-8"),
    ("ex153", "Pin Squat", MuscleGroup.QUADS, Category.BARBELL, "5-8"),
    ("ex154", "Safety Bar Squat", MuscleGroup.QUADS, Category.BARBELL, "6-10"),
    ("ex155", "Belt Squat", MuscleGroup.QUADS, Category.MACHINE, "8-12"),
    ("ex156", "Trap Bar Deadlift", MuscleGroup.QUADS, Category.BARBELL, "5-8"),
    ("ex157", "Deficit Deadlift", MuscleGroup.LOWER_BACK, Category.BARBELL, "5-8"),
    ("ex158", "Block Pull", MuscleGroup.UPPER_BACK, Category.BARBELL, "5-8"),
    ("ex159", "Seal Row", MuscleGroup.MID_BACK, Category.BARBELL, "8-12"),
    ("ex160", "Meadows Row", MuscleGroup.LATS, Category.BARBELL, "8-12"),
    ("ex161", "Landmine Row", MuscleGroup.MID_BACK, Category.BARBELL, "8-12"),
    ("ex162", "Bradford Press", MuscleGroup.FRONT_DELTS, Category.BARBELL, "8-12"),
    ("ex163", "Viking Press", MuscleGroup.FRONT_DELTS, Category.BARBELL, "8-12"),
    ("ex164", "Lu Raise", MuscleGroup.SIDE_DELTS, Category.DUMBBELL, "12-15"),
    ("ex165", "Cuban Press", MuscleGroup.REAR_DELTS, Category.DUMBBELL, "10-12"),
    ("ex166", "Waiter Curl", MuscleGroup.BICEPS, Category.DUMBBELL, "10-15"),
    ("ex167", "21s (Bicep Curls)", MuscleGroup.BICEPS, Category.BARBELL, "21"),
    ("ex168", "Zottman Curl", MuscleGroup.FOREARMS, Category.DUMBBELL, "8-12"),
    ("ex169", "Tate Press", MuscleGroup.TRICEPS, Category.DUMBBELL, "10-12"),
    ("ex170", "California Press", MuscleGroup.TRICEPS, Category.BARBELL, "8-12"),
]


def catalog_exercises() -> list[Exercise]:
    """Return fresh Exercise rows for every catalog entry."""
    return [
        Exercise(
            id=exercise_id,
            name=name,
            primary_muscle_group=muscle_group,
            category=category,
            common_rep_ranges=rep_ranges,
        )
        for exercise_id, name, muscle_group, category, rep_ranges in CATALOG
    ]
