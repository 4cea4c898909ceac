class Translator:
    """Translate user-facing analytics messages. English keys are the source text."""

    def __init__(self, language: str = "en") -> None:
        self.language = language
        self.translations = {
            "en": {},
            "nl": {
                # muscle groups
                "chest": "borst",
                "back": "rug",
                "shoulders": "schouders",
                "legs": "benen",
                "arms": "armen",
                "abs": "buik",
                "glutes": "billen",
                "calves": "kuiten",
                # exercise classification
                "compound": "compound",
                "isolation": "isolatie",
                "beginner": "beginner",
                "intermediate": "gevorderd",
                "advanced": "ervaren",
                # progression
                "Complete a full set to get suggestions": "Voer je eerste volledige set uit om suggesties te krijgen",
                "New PR! +{diff}kg 1RM (+{pct:.1f}%)": "Nieuw PR! +{diff}kg 1RM (+{pct:.1f}%)",
                "You did {reps} reps! Try {weight}kg for 6-8 reps next time": "Je deed {reps} reps! Probeer volgende keer {weight}kg voor 6-8 reps",
                "Try to reach {low}-{high} reps with {weight}kg": "Probeer {weight}kg voor {low}-{high} reps te bereiken",
                "Good progress! Keep this weight until you reach 10+ reps": "Goede progressie! Blijf dit gewicht gebruiken tot je 10+ reps haalt",
                "Focus on recovery. Use {weight}kg for volume work": "Focus op herstel. Gebruik {weight}kg voor volume-werk",
                "Try adding an extra set for more volume": "Probeer een extra set toe te voegen voor meer volume",
                # plateaus
                "Consider a deload week (50-60% intensity)": "Overweeg een deload week (50-60% intensiteit)",
                "Switch to a variation of this exercise": "Wissel naar een variatie van deze oefening",
                "Try different rep ranges (5x5 -> 3x8-10)": "Probeer andere rep ranges (5x5 -> 3x8-10)",
                "Add sets at the same weight": "Verhoog sets met zelfde gewicht",
                "Add paused reps (2 second hold)": "Voeg paused reps toe (2 sec hold)",
                "Try a close-grip or incline variation": "Probeer close-grip of incline variatie",
                "Check your squat depth, full range of motion can help": "Check je squat depth, volle ROM kan helpen",
                "Try pause squats or box squats": "Probeer pause squats of box squats",
                "Add deficit deadlifts": "Voeg deficit deadlifts toe",
                "Try Romanian deadlifts for hamstring focus": "Probeer Romanian deadlifts voor hamstring focus",
                "Increase time under tension (slower eccentric)": "Verhoog time under tension (langzamer neerlaten)",
                "Change your grip width": "Wissel grip width",
                "Get enough sleep (7-9h) and nutrition": "Zorg voor voldoende slaap (7-9u) en voeding",
                "Check that you apply progressive overload (+2.5kg/week)": "Check of je progressive overload toepast (+2.5kg/week)",
                "Keep training to establish baseline": "Blijf trainen om een basislijn op te bouwen",
                "Complete more sets to track progress": "Voltooi meer sets om progressie te volgen",
                "Keep applying progressive overload": "Blijf progressive overload toepassen",
                "Time for a deload or variation in reps/sets": "Tijd voor deload of variatie in reps/sets",
                # muscle volume
                "Train more {under} - currently {ratio:.1f}x less than {over}": "Train meer {under} - nu {ratio:.1f}x minder dan {over}",
                # weekly summary
                "No workouts this week - time to get started!": "Geen workouts deze week - tijd om te beginnen!",
                "Great week! {count} workouts completed": "Geweldige week! {count} workouts voltooid",
                "Nice work! {count} workouts this week": "Goed bezig! {count} workouts deze week",
                "Total volume: {volume}k kg moved": "Totaal volume: {volume}k kg verplaatst",
                "Top exercise: {name} ({sets} sets)": "Top oefening: {name} ({sets} sets)",
                # deload signals
                "Volume dropped {pct:.0f}% over 3 weeks - possible fatigue": "Volume gedaald met {pct:.0f}% over 3 weken - mogelijk vermoeidheid",
                "Average weight {pct:.0f}% lower than the previous period": "Gemiddeld gewicht {pct:.0f}% lager dan vorige periode",
                "{weeks} weeks in a row of high volume - time to recover": "{weeks} weken achtereen hoog volume - tijd voor herstel",
                "{count} exercises stagnated - possible systemic fatigue": "{count} oefeningen gestagneerd - mogelijk systemische vermoeidheid",
                "Volume spike followed by a crash - overreaching detected": "Volume spike gevolgd door crash - overreaching gedetecteerd",
                # deload recommendations
                "Your training looks good! Keep applying progressive overload.": "Je training ziet er goed uit! Blijf progressive overload toepassen.",
                "Deload strongly recommended! Multiple signs of overtraining - rest this week.": "Deload sterk aanbevolen! Meerdere signalen van overtraining - neem deze week rust.",
                "Deload recommended this week or next. Your body needs recovery.": "Deload aanbevolen deze of volgende week. Je lichaam heeft herstel nodig.",
                "Consider a deload within 1-2 weeks. Several signs of fatigue.": "Overweeg een deload binnen 1-2 weken. Meerdere signalen van vermoeidheid.",
                "Monitor your progress. Some signs of fatigue detected.": "Monitor je progressie. Enkele signalen van vermoeidheid gedetecteerd.",
                # deload protocols
                "Cut every exercise to 50% of your normal sets": "Reduceer alle oefeningen tot 50% van normale sets",
                "Use 60% of your normal weights": "Gebruik 60% van je normale gewichten",
                "Focus on technique and mindful movement": "Focus op techniek en mindful movement",
                "Increase sleep to 8-9 hours per night": "Verhoog slaap tot 8-9 uur per nacht",
                "Consider extra rest days this week": "Overweeg extra rustdag(en) deze week",
                "Reduce volume by 40% (e.g. 5 sets -> 3 sets)": "Reduceer volume met 40% (bijv. 5 sets -> 3 sets)",
                "Use 70% of your normal weights": "Gebruik 70% van je normale gewichten",
                "Keep the frequency but shorten workouts": "Behoud frequentie maar verkort workouts",
                "Focus on compound movements, skip accessories": "Focus op compound movements, skip accessories",
                "Increase protein intake (2g/kg) for recovery": "Verhoog protein intake (2g/kg) voor herstel",
                "Reduce sets by about 30% this week": "Reduceer sets met ~30% deze week",
                "Use 75-80% of your normal weights": "Gebruik 75-80% van normale gewichten",
                "Keep all exercises but with less volume": "Behoud alle oefeningen maar minder volume",
                "Add stretching and mobility work": "Extra stretching en mobility work",
                "Make sure nutrition and hydration are adequate": "Zorg voor adequate voeding en hydratatie",
                "Light deload: drop 1-2 sets per exercise": "Lichte deload: reduceer 1-2 sets per oefening",
                "Use about 85% of your normal weights": "Gebruik ~85% van normale gewichten",
                "Optional: replace one workout with active recovery": "Optioneel: vervang 1 workout door actief herstel",
                "Focus on sleep and stress management": "Focus op slaap en stress management",
                # starting weights
                "Based on your recent performance (avg {weight:.1f}kg). Start slightly lighter to allow for progressive overload.": "Gebaseerd op je recente prestaties (gem. {weight:.1f}kg). Begin iets lichter om ruimte te laten voor progressive overload.",
                "Last {count} workouts with {name}": "Laatste {count} workouts met {name}",
                "Estimated from other {group} exercises, adjusted for a {type} movement.": "Geschat op basis van andere {group} oefeningen, aangepast voor een {type} beweging.",
                "Performance on {names}": "Prestaties op {names}",
                "Based on your performance on similar {group} exercises. Starting conservatively at 85% to ensure proper form.": "Gebaseerd op vergelijkbare {group} oefeningen. Conservatief begonnen op 85% voor een goede techniek.",
                "Estimated for {tier} level, {type} exercise - start light and increase gradually.": "Geschat voor niveau {tier}, {type} oefening - begin licht en bouw geleidelijk op.",
                "Experience level: {tier}, body weight: {weight}kg": "Ervaringsniveau: {tier}, lichaamsgewicht: {weight}kg",
            },
        }

    def set_language(self, lang: str) -> None:
        self.language = lang

    def gettext(self, key: str) -> str:
        return self.translations.get(self.language, {}).get(key, key)
