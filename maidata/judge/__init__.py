"""Judge timing data, judged notes and the sensor-driven judge simulator."""