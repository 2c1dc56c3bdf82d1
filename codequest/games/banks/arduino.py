"""Arduino question banks."""

PIN_POWER_UP = [
    {
        "id": "pin-power-up-001",
        "task": "Configure pin 7 as an OUTPUT for controlling an LED.",
        "snippet": "void setup() {\n  pinMode(7, /* YOUR ANSWER HERE */);\n}\n\nvoid loop() {\n}",
        "placeholder": "OUTPUT / INPUT",
        "correct_answer": "OUTPUT",
        "explanation": "`pinMode(pin, mode)` sets a pin to INPUT or OUTPUT. Driving an LED needs OUTPUT.",
    },
    {
        "id": "pin-power-up-002",
        "task": "Turn ON an LED connected to pin 13.",
        "snippet": "void setup() {\n  pinMode(13, OUTPUT);\n}\n\nvoid loop() {\n"
                   "  /* YOUR ANSWER HERE */(13, HIGH);\n  delay(1000);\n}",
        "placeholder": "digitalWrite / digitalRead",
        "correct_answer": "digitalWrite",
        "explanation": "`digitalWrite(pin, value)` writes HIGH or LOW to a digital pin; HIGH turns the LED on.",
    },
    {
        "id": "pin-power-up-003",
        "task": "Turn OFF an LED connected to pin 13.",
        "snippet": "void loop() {\n  digitalWrite(13, HIGH);\n  delay(1000);\n"
                   "  digitalWrite(13, /* YOUR ANSWER HERE */);\n  delay(1000);\n}",
        "placeholder": "HIGH / LOW",
        "correct_answer": "LOW",
        "explanation": "`digitalWrite(pin, LOW)` sets the pin to 0V, turning the LED off.",
    },
    {
        "id": "pin-power-up-004",
        "task": "Read the state of a pushbutton connected to pin 2.",
        "snippet": "int buttonState = 0;\n\nvoid setup() {\n  pinMode(2, INPUT);\n}\n\nvoid loop() {\n"
                   "  buttonState = /* YOUR ANSWER HERE */(2);\n}",
        "placeholder": "digitalRead / analogRead",
        "correct_answer": "digitalRead",
        "explanation": "`digitalRead(pin)` returns HIGH or LOW, which is what a pushbutton produces.",
    },
    {
        "id": "pin-power-up-005",
        "task": "Set pin 9 to a PWM value of 128 to dim an LED.",
        "snippet": "void loop() {\n  /* YOUR ANSWER HERE */(9, 128);\n}",
        "placeholder": "analogWrite / digitalWrite",
        "correct_answer": "analogWrite",
        "explanation": "`analogWrite(pin, value)` emits a PWM wave from 0 (off) to 255 (full on) on PWM pins.",
    },
    {
        "id": "pin-power-up-006",
        "task": "Pause the program for 2 seconds.",
        "snippet": "void loop() {\n  /* YOUR ANSWER HERE */(2000); // 2000 milliseconds\n}",
        "placeholder": "delay / millis",
        "correct_answer": "delay",
        "explanation": "`delay(ms)` pauses the program for the given number of milliseconds.",
    },
    {
        "id": "pin-power-up-007",
        "task": "Configure an input pin with an internal pull-up resistor (for a pushbutton).",
        "snippet": "void setup() {\n  pinMode(4, /* YOUR ANSWER HERE */);\n}",
        "placeholder": "INPUT_PULLUP / INPUT / OUTPUT",
        "correct_answer": "INPUT_PULLUP",
        "explanation": "`INPUT_PULLUP` enables the internal pull-up resistor so the pin reads HIGH until "
                       "the button pulls it to GND.",
    },
    {
        "id": "pin-power-up-008",
        "task": "Read the analog value from analog pin A0.",
        "snippet": "void loop() {\n  int sensorValue = /* YOUR ANSWER HERE */(A0);\n"
                   "  Serial.println(sensorValue);\n}",
        "placeholder": "analogRead / digitalRead",
        "correct_answer": "analogRead",
        "explanation": "`analogRead(pin)` converts the pin voltage to a value between 0 and 1023.",
    },
    {
        "id": "pin-power-up-009",
        "task": "Declare an integer variable named 'buttonCount' and initialize it to zero.",
        "snippet": "void loop() {\n  /* YOUR ANSWER HERE */ buttonCount = 0;\n}",
        "placeholder": "int / float / char",
        "correct_answer": "int",
        "explanation": "`int` is the data type for whole numbers in Arduino (C++).",
    },
    {
        "id": "pin-power-up-010",
        "task": "Use a simple 'if' statement to check if digital pin 5 is HIGH.",
        "snippet": "void loop() {\n  /* YOUR ANSWER HERE */ (digitalRead(5) == HIGH) {\n    // Pin is high\n  }\n}",
        "placeholder": "if / while / for",
        "correct_answer": "if",
        "explanation": "`if` runs its block only when the condition, here pin 5 reading HIGH, holds.",
    },
]

SERIAL_COMMUNICATION_SAGA = [
    {
        "id": "serial-saga-001",
        "task": "Initialize serial communication at the common baud rate of 9600.",
        "snippet": "void setup() {\n  Serial./* YOUR ANSWER HERE */(9600);\n}\n\nvoid loop() {\n  // Main loop\n}",
        "placeholder": "begin / print",
        "correct_answer": "begin",
        "explanation": "`Serial.begin(baudRate)` opens the serial port at the given bits per second.",
    },
    {
        "id": "serial-saga-002",
        "task": "Print 'Hello Serial!' to the Serial Monitor, followed by a new line.",
        "snippet": "void setup() {\n  Serial.begin(9600);\n}\n\nvoid loop() {\n"
                   "  Serial./* YOUR ANSWER HERE */(\"Hello Serial!\");\n  delay(1000);\n}",
        "placeholder": "print / println",
        "correct_answer": "println",
        "explanation": "`Serial.println()` prints the data and then a carriage return and newline.",
    },
    {
        "id": "serial-saga-003",
        "task": "Print the value of 'sensorValue' to the Serial Monitor without a new line.",
        "snippet": "int sensorValue = 102;\nvoid setup() {\n  Serial.begin(9600);\n}\n\nvoid loop() {\n"
                   "  Serial./* YOUR ANSWER HERE */(sensorValue);\n  delay(100);\n}",
        "placeholder": "print / println",
        "correct_answer": "print",
        "explanation": "`Serial.print()` does not append a newline, so later output continues on the same line.",
    },
    {
        "id": "serial-saga-004",
        "task": "Check whether incoming serial data is available to read.",
        "snippet": "void setup() {\n  Serial.begin(9600);\n}\n\nvoid loop() {\n"
                   "  if (Serial./* YOUR ANSWER HERE */() > 0) {\n    // Data is available\n  }\n}",
        "placeholder": "available / read",
        "correct_answer": "available",
        "explanation": "`Serial.available()` returns how many bytes are waiting in the receive buffer.",
    },
    {
        "id": "serial-saga-005",
        "task": "Read the first incoming byte of serial data.",
        "snippet": "char incomingByte;\nvoid setup() {\n  Serial.begin(9600);\n}\n\nvoid loop() {\n"
                   "  if (Serial.available() > 0) {\n    incomingByte = Serial./* YOUR ANSWER HERE */();\n"
                   "    Serial.print(\"Received: \");\n    Serial.println(incomingByte);\n  }\n}",
        "placeholder": "read / write",
        "correct_answer": "read",
        "explanation": "`Serial.read()` returns the first byte in the buffer and removes it.",
    },
    {
        "id": "serial-saga-006",
        "task": "Flush the serial port after reading a command.",
        "snippet": "void setup() {\n  Serial.begin(9600);\n}\n\nvoid loop() {\n"
                   "  if (Serial.available() > 0) {\n    Serial.read(); // Read one byte\n"
                   "    Serial./* YOUR ANSWER HERE */(); // Clear the rest\n  }\n}",
        "placeholder": "flush / end",
        "correct_answer": "flush",
        "explanation": "`Serial.flush()` waits for outgoing data to finish sending. Some cores also clear "
                       "the input buffer; a `while (Serial.available()) Serial.read();` loop is the "
                       "portable way to drain it.",
    },
    {
        "id": "serial-saga-007",
        "task": "Print the ASCII value of a character.",
        "snippet": "char myChar = 'A';\nvoid setup() {\n  Serial.begin(9600);\n"
                   "  Serial.print(\"ASCII value of A: \");\n  Serial./* YOUR ANSWER HERE */((int)myChar);\n}\n\n"
                   "void loop() {\n  // nothing\n}",
        "placeholder": "println / print",
        "correct_answer": "println",
        "explanation": "Casting to `(int)` makes `Serial.println()` print the numeric code followed by a newline.",
    },
    {
        "id": "serial-saga-008",
        "task": "Start serial communication once a native USB serial port is ready.",
        "snippet": "void setup() {\n  while (!Serial) {\n"
                   "    ; // wait for serial port to connect. Needed for native USB port only\n  }\n"
                   "  Serial./* YOUR ANSWER HERE */(9600);\n}\n\nvoid loop() {\n  // communication\n}",
        "placeholder": "begin / ready",
        "correct_answer": "begin",
        "explanation": "On native-USB boards `while (!Serial)` waits for the host connection; "
                       "`Serial.begin()` then starts communication.",
    },
    {
        "id": "serial-saga-009",
        "task": "Send the byte value 65 over the serial port.",
        "snippet": "void setup() {\n  Serial.begin(9600);\n}\n\nvoid loop() {\n"
                   "  Serial./* YOUR ANSWER HERE */(65); // Sends ASCII 'A'\n  delay(1000);\n}",
        "placeholder": "write / print",
        "correct_answer": "write",
        "explanation": "`Serial.write()` sends raw bytes; 65 goes out as the single byte 'A'.",
    },
    {
        "id": "serial-saga-010",
        "task": "Keep a constant string in flash memory while printing it.",
        "snippet": "int value = 123;\nvoid setup() {\n  Serial.begin(9600);\n"
                   "  Serial.print(/* YOUR ANSWER HERE */(\"Value: \"));\n  Serial.println(value);\n}\n\n"
                   "void loop() {\n  // nothing\n}",
        "placeholder": "F / String",
        "correct_answer": "F",
        "explanation": "The `F()` macro stores string literals in flash instead of RAM, which matters on "
                       "memory-constrained boards.",
    },
]

SENSOR_SCAVENGER_HUNT = [
    {
        "id": "sensor-hunt-001",
        "task": "A photoresistor (LDR) is on analog pin A0. Print its reading to the Serial Monitor.",
        "snippet": "void setup() {\n  Serial.begin(9600);\n}\n\nvoid loop() {\n  int lightValue = analogRead(A0);\n"
                   "  Serial./* YOUR ANSWER HERE */(lightValue);\n  delay(100);\n}",
        "placeholder": "println / print",
        "correct_answer": "println",
        "explanation": "`Serial.println()` prints each reading on its own line. The LDR gives an analog "
                       "value that follows light intensity.",
    },
    {
        "id": "sensor-hunt-002",
        "task": "An LDR on A0 forms a voltage divider with a 10k ohm resistor. Where does the resistor's "
                "other end connect?",
        "snippet": "// LDR connection:\n// One LDR leg to 5V.\n// The other LDR leg to A0.\n"
                   "// And from that same A0 pin, connect a 10k ohm resistor to /* YOUR ANSWER HERE */.",
        "placeholder": "GND / 3.3V / Digital Pin",
        "correct_answer": "GND",
        "explanation": "The LDR runs from 5V to the analog pin and the fixed resistor from that pin to GND, "
                       "so the pin reads the divided voltage.",
    },
    {
        "id": "sensor-hunt-003",
        "task": "A passive buzzer is on digital pin 8. Play a 500 Hz tone for 1 second.",
        "snippet": "void setup() {\n  pinMode(8, OUTPUT); // Buzzer pin\n}\n\nvoid loop() {\n"
                   "  /* YOUR ANSWER HERE */(8, 500, 1000); // pin, frequency, duration\n"
                   "  delay(2000); // Wait 2 seconds before next tone\n}",
        "placeholder": "tone / noTone",
        "correct_answer": "tone",
        "explanation": "`tone(pin, frequency, duration)` outputs a square wave at the given frequency.",
    },
    {
        "id": "sensor-hunt-004",
        "task": "Stop the tone playing on the buzzer on pin 8.",
        "snippet": "void setup() {\n  pinMode(8, OUTPUT);\n}\n\nvoid loop() {\n  tone(8, 500, 1000);\n"
                   "  delay(1000);\n  /* YOUR ANSWER HERE */(8); // Stop the tone\n  delay(2000);\n}",
        "placeholder": "noTone / tone",
        "correct_answer": "noTone",
        "explanation": "`noTone(pin)` stops a wave started by `tone()`.",
    },
    {
        "id": "sensor-hunt-005",
        "task": "Read a potentiometer on A1 and scale it to 0-255 for LED brightness (PWM).",
        "snippet": "int potValue = 0;\nint ledBrightness = 0;\n\nvoid setup() {\n"
                   "  pinMode(9, OUTPUT); // PWM pin for LED\n}\n\nvoid loop() {\n  potValue = analogRead(A1);\n"
                   "  ledBrightness = /* YOUR ANSWER HERE */(potValue, 0, 1023, 0, 255);\n"
                   "  analogWrite(9, ledBrightness);\n}",
        "placeholder": "map / constrain",
        "correct_answer": "map",
        "explanation": "`map(value, fromLow, fromHigh, toLow, toHigh)` rescales 0-1023 to 0-255.",
    },
    {
        "id": "sensor-hunt-006",
        "task": "A PIR motion sensor (active HIGH) is on pin 4. Print 'Motion detected!' when it triggers.",
        "snippet": "void setup() {\n  Serial.begin(9600);\n  pinMode(4, INPUT); // PIR sensor pin\n}\n\n"
                   "void loop() {\n  int pirState = digitalRead(4);\n"
                   "  if (pirState == /* YOUR ANSWER HERE */) {\n    Serial.println(\"Motion detected!\");\n"
                   "  }\n  delay(500);\n}",
        "placeholder": "HIGH / LOW",
        "correct_answer": "HIGH",
        "explanation": "Most PIR sensors output HIGH while they detect motion.",
    },
    {
        "id": "sensor-hunt-007",
        "task": "A DS18B20 temperature sensor (OneWire) is on pin 2. Pull in its driver library.",
        "snippet": "#include <OneWire.h>\n/* YOUR ANSWER HERE */ <DallasTemperature.h>\n\n"
                   "OneWire oneWire(2);\nDallasTemperature sensors(&oneWire);\n\nvoid setup() {\n"
                   "  Serial.begin(9600);\n  sensors.begin(); // Start the sensor\n}\n\nvoid loop() {\n"
                   "  // read temperature\n}",
        "placeholder": "#include / #define",
        "correct_answer": "#include",
        "explanation": "`#include` brings a library into the sketch; the DS18B20 needs both "
                       "`OneWire.h` and `DallasTemperature.h`.",
    },
    {
        "id": "sensor-hunt-008",
        "task": "After requesting temperatures, read the first DS18B20 in Celsius.",
        "snippet": "#include <OneWire.h>\n#include <DallasTemperature.h>\n\nOneWire oneWire(2);\n"
                   "DallasTemperature sensors(&oneWire);\n\nvoid setup() {\n  Serial.begin(9600);\n"
                   "  sensors.begin();\n}\n\nvoid loop() {\n"
                   "  sensors.requestTemperatures(); // Send the command to get temperatures\n"
                   "  float tempC = sensors./* YOUR ANSWER HERE */(0); // Get temp from the first device\n"
                   "  Serial.print(\"Temperature: \");\n  Serial.println(tempC);\n  delay(2000);\n}",
        "placeholder": "getTempCByIndex / getTempFByIndex",
        "correct_answer": "getTempCByIndex",
        "explanation": "`getTempCByIndex(index)` returns the Celsius reading of the device at that "
                       "position on the bus.",
    },
    {
        "id": "sensor-hunt-009",
        "task": "Move a servo on pin 9 to 90 degrees.",
        "snippet": "#include <Servo.h>\n\nServo myServo;\n\nvoid setup() {\n"
                   "  myServo.attach(9); // Attaches the servo on pin 9\n}\n\nvoid loop() {\n"
                   "  myServo./* YOUR ANSWER HERE */(90); // Move to 90 degrees\n  delay(1000);\n}",
        "placeholder": "write / read",
        "correct_answer": "write",
        "explanation": "`myServo.write(angle)` sets the servo angle, usually 0 to 180 degrees.",
    },
    {
        "id": "sensor-hunt-010",
        "task": "An HC-SR04 ultrasonic sensor has Trig on D9 and Echo on D10. Measure the echo pulse.",
        "snippet": "const int trigPin = 9;\nconst int echoPin = 10;\nlong duration;\nint distanceCm;\n\n"
                   "void setup() {\n  pinMode(trigPin, OUTPUT);\n  pinMode(echoPin, INPUT);\n"
                   "  Serial.begin(9600);\n}\n\nvoid loop() {\n  digitalWrite(trigPin, LOW);\n"
                   "  delayMicroseconds(2);\n  digitalWrite(trigPin, HIGH);\n  delayMicroseconds(10);\n"
                   "  digitalWrite(trigPin, LOW);\n\n  duration = /* YOUR ANSWER HERE */(echoPin, HIGH);\n\n"
                   "  distanceCm = duration * 0.034 / 2;\n  Serial.print(\"Distance: \");\n"
                   "  Serial.print(distanceCm);\n  Serial.println(\" cm\");\n  delay(100);\n}",
        "placeholder": "pulseIn / digitalRead",
        "correct_answer": "pulseIn",
        "explanation": "`pulseIn(pin, value)` times how long the pin stays at `value`, in microseconds: "
                       "the echo's round trip.",
    },
]
