from .shortest_path import ShortestPathExercise
